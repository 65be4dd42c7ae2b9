from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from booking_grid.schemas.event import Event
from booking_grid.schemas.grid import CellKey, DropTarget
from booking_grid.services.event_locator import parse_wall_clock
from booking_grid.services.time_grid import time_slots

logger = logging.getLogger(__name__)

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"

EventUpdateCallback = Callable[[Event], None]


def duration_minutes(event: Event) -> int:
    """
    Whole-minute duration of an event (end - start). Seconds are truncated.

    Measured on wall-clock time: offsets on either timestamp are ignored, so
    the duration always matches the block height drawn by the layout.
    """
    delta = parse_wall_clock(event.end) - parse_wall_clock(event.start)
    return int(delta.total_seconds() // 60)


def reschedule(event: Event, drop_hour: int, drop_date: date) -> Event:
    """
    Move an event to `drop_date` at `drop_hour`:00, preserving its duration.

    Returns a new Event with `start`/`end` replaced by "YYYY-MM-DDTHH:MM:SS"
    strings; every other field is carried over and `event` itself is left
    untouched.

    `drop_hour` is not range-checked here. An hour outside 0..23 raises the
    ValueError of the underlying datetime constructor.
    """
    if isinstance(drop_date, datetime):
        drop_date = drop_date.date()

    minutes = duration_minutes(event)
    new_start = datetime.combine(drop_date, time(hour=drop_hour))
    new_end = new_start + timedelta(minutes=minutes)

    return event.model_copy(
        update={
            "start": new_start.strftime(ISO_FORMAT),
            "end": new_end.strftime(ISO_FORMAT),
        }
    )


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragController:
    """
    Drag lifecycle for rescheduling events on a time grid.

    States
    ------
    IDLE -> DRAGGING   on start_drag(event)
    DRAGGING -> IDLE   on end_drag(target)

    The resolver runs exactly on the DRAGGING -> IDLE transition and only
    when the drop landed on a target. The result is delivered through
    `on_event_update`; without a callback, a drop is not observable and
    nothing is emitted.
    """

    def __init__(self, on_event_update: Optional[EventUpdateCallback] = None):
        self.on_event_update = on_event_update
        self.state = DragState.IDLE
        self.active_event: Optional[Event] = None
        self._cells: Dict[CellKey, DropTarget] = {}

    @property
    def is_dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    # ------------------------------------------------------------------
    # Drop cell registry
    # ------------------------------------------------------------------
    def register_cell(self, key: CellKey, target: DropTarget) -> None:
        self._cells[key] = target

    def register_grid(self, days: Iterable[date]) -> None:
        """
        Register one drop cell per (day index, hour) of a rendered time grid.
        """
        for day_index, day in enumerate(days):
            for hour in time_slots():
                self.register_cell(CellKey(day_index, hour), DropTarget(day, hour))

    def target_for(self, key: CellKey) -> Optional[DropTarget]:
        return self._cells.get(key)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start_drag(self, event: Event) -> None:
        """
        Begin a gesture. Ignored while another gesture is in progress.
        """
        if self.state is DragState.DRAGGING:
            logger.debug(
                "Drag of %s ignored; %s is already being dragged",
                event.id,
                self.active_event.id if self.active_event else None,
            )
            return

        self.state = DragState.DRAGGING
        self.active_event = event
        logger.debug("Drag started for event %s", event.id)

    def cancel(self) -> None:
        """
        Abort the gesture without emitting an update.
        """
        self.end_drag(None)

    def end_drag(self, target: Optional[DropTarget]) -> Optional[Event]:
        """
        Finish the gesture. Returns the rescheduled event when one was
        emitted, otherwise None.
        """
        if self.state is not DragState.DRAGGING:
            return None

        event = self.active_event
        self.state = DragState.IDLE
        self.active_event = None

        if target is None or event is None:
            logger.debug("Drag ended without a drop target; nothing to do")
            return None

        if self.on_event_update is None:
            logger.debug("No update callback registered; drop of %s ignored", event.id)
            return None

        updated = reschedule(event, target.hour, target.day)
        logger.debug(
            "Event %s rescheduled to %s - %s", updated.id, updated.start, updated.end
        )
        self.on_event_update(updated)
        return updated

    def drop_on_cell(self, key: CellKey) -> Optional[Event]:
        """
        End the gesture over a registered cell. Unknown cells count as a
        cancelled drop.
        """
        return self.end_drag(self.target_for(key))
