from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from booking_grid.schemas.event import Event


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 event timestamp using local wall-clock semantics.

    Offsets, when present, are kept on the value but never converted: hour and
    day extraction always reads the wall-clock fields as written. A malformed
    value raises ValueError.
    """
    return datetime.fromisoformat(value)


def parse_wall_clock(value: str) -> datetime:
    """
    Parse a timestamp and drop its offset, keeping the wall-clock fields.

    Use this for arithmetic between two event timestamps so that mixed or
    differing offsets are never converted before subtracting.
    """
    return parse_timestamp(value).replace(tzinfo=None)


def _as_date(value: date) -> date:
    # datetime is a subclass of date; compare calendar days only.
    if isinstance(value, datetime):
        return value.date()
    return value


def event_date(event: Event) -> date:
    """
    Calendar date the event falls on (the date of its start).
    """
    return parse_timestamp(event.start).date()


def occupies_slot(event: Event, day: date, hour: int) -> bool:
    """
    True when the event starts on `day` and occupies the hour row `hour`.

    An event occupies its start hour and every hour strictly between its start
    and end hours. The end hour itself is never occupied, so an event ending
    exactly on the hour does not spill into the next row. Only the start day is
    considered; an event running past midnight is not matched on the next day.
    """
    start = parse_timestamp(event.start)
    if start.date() != _as_date(day):
        return False

    end = parse_timestamp(event.end)
    return start.hour == hour or start.hour < hour < end.hour


def events_for_date(events: Iterable[Event], day: date) -> list[Event]:
    """
    Events whose start falls on the same calendar day as `day`, in input order.
    """
    target = _as_date(day)
    return [event for event in events if event_date(event) == target]


def events_for_slot(events: Iterable[Event], day: date, hour: int) -> list[Event]:
    """
    Events that start on `day` and occupy the hour row `hour`, in input order.
    """
    return [event for event in events if occupies_slot(event, day, hour)]
