from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from booking_grid.schemas.event import Event, Service
from booking_grid.schemas.grid import (
    CalendarGrid,
    CalendarView,
    EventPosition,
    GridCell,
    PositionedEvent,
)
from booking_grid.services.event_locator import (
    events_for_date,
    events_for_slot,
    parse_timestamp,
)
from booking_grid.services.layout_calculator import (
    DEFAULT_PIXELS_PER_HOUR,
    pack_columns,
    position_of,
)
from booking_grid.services.service_colors import (
    DEFAULT_SERVICE_COLOR,
    ServiceColorLookup,
    status_classes,
)
from booking_grid.services.time_grid import (
    days_to_display,
    go_to_next,
    go_to_previous,
    time_slots,
    view_title,
)

logger = logging.getLogger(__name__)


def _place(
    event: Event,
    colors: ServiceColorLookup,
    position: EventPosition | None = None,
) -> PositionedEvent:
    service = colors.service_for(event.service_id)
    return PositionedEvent(
        event=event,
        color=colors.color_for(event.service_id),
        service_name=service.name if service is not None else None,
        status_classes=status_classes(event.status),
        position=position,
        style=position.as_style() if position is not None else None,
    )


def build_grid(
    events: Sequence[Event],
    services: Sequence[Service],
    anchor_date: date,
    view: CalendarView | str,
    *,
    pack_overlaps: bool = False,
    pixels_per_hour: float = DEFAULT_PIXELS_PER_HOUR,
    column_width_percent: float = 100.0,
    default_color: str = DEFAULT_SERVICE_COLOR,
) -> CalendarGrid:
    """
    Run the render pipeline for one page of the calendar.

    Steps
    -----
    1) Time grid model -> days (and hours for day/week views).
    2) Event locator   -> events per cell.
    3) Layout          -> geometry per event (day/week views only).
    4) Service colours -> tint per event, default colour on a dangling serviceId.

    Day/week cells only carry the events that *start* in their hour, so each
    event is drawn once from its starting row and its height covers the rest
    of its span. Month cells carry every event starting that day.

    With `pack_overlaps`, events that overlap within a day are split into
    side-by-side columns. Off by default: every event is laid out in a single
    column of `column_width_percent`.
    """
    view = CalendarView(view)
    days = days_to_display(anchor_date, view)
    colors = ServiceColorLookup(services, default_color=default_color)
    cells: list[GridCell] = []

    if view is CalendarView.MONTH:
        hours: list[int] = []
        for day_index, day in enumerate(days):
            cells.append(
                GridCell(
                    day_index=day_index,
                    day=day,
                    hour=None,
                    in_current_month=day.month == anchor_date.month,
                    events=[
                        _place(event, colors)
                        for event in events_for_date(events, day)
                    ],
                )
            )
    else:
        hours = time_slots()
        for day_index, day in enumerate(days):
            columns = pack_columns(events_for_date(events, day)) if pack_overlaps else {}
            for hour in hours:
                placed: list[PositionedEvent] = []
                for event in events_for_slot(events, day, hour):
                    if parse_timestamp(event.start).hour != hour:
                        continue
                    if event.id in columns:
                        col_idx, col_count = columns[event.id]
                        width = column_width_percent / col_count
                    else:
                        col_idx, width = 0, column_width_percent
                    position = position_of(
                        event,
                        column_width_percent=width,
                        column_index=col_idx,
                        pixels_per_hour=pixels_per_hour,
                    )
                    placed.append(_place(event, colors, position))
                cells.append(
                    GridCell(
                        day_index=day_index,
                        day=day,
                        hour=hour,
                        in_current_month=day.month == anchor_date.month,
                        events=placed,
                    )
                )

    logger.debug(
        "Built %s grid for %s: %d days, %d cells, %d events",
        view.value,
        anchor_date,
        len(days),
        len(cells),
        len(events),
    )

    return CalendarGrid(
        view=view,
        anchor_date=anchor_date,
        title=view_title(anchor_date, view),
        days=days,
        hours=hours,
        cells=cells,
        previous_anchor=go_to_previous(anchor_date, view),
        next_anchor=go_to_next(anchor_date, view),
    )
