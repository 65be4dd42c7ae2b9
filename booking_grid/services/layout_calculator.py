from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from booking_grid.schemas.event import Event
from booking_grid.schemas.grid import EventPosition
from booking_grid.services.event_locator import parse_timestamp, parse_wall_clock

MINUTES_PER_HOUR = 60
DEFAULT_PIXELS_PER_HOUR = 60

_EPOCH = datetime(1970, 1, 1)


def _minute_of_day(value: str) -> int:
    moment = parse_timestamp(value)
    return moment.hour * MINUTES_PER_HOUR + moment.minute


def position_of(
    event: Event,
    column_width_percent: float = 100.0,
    column_index: int = 0,
    pixels_per_hour: float = DEFAULT_PIXELS_PER_HOUR,
) -> EventPosition:
    """
    Map an event's start/end onto grid geometry.

    Rules
    -----
    - top    = minutes since midnight of `start`, scaled to pixels
    - height = (end minute-of-day) - (start minute-of-day), scaled to pixels
    - left   = column_index * column_width_percent (%)
    - width  = column_width_percent (%)

    At the default 60 px/hour one minute is one pixel. The height is not
    clamped: an event with end <= start yields a zero or negative height.
    Only the time of day is used, so an event that crosses midnight also
    produces a negative height.
    """
    scale = pixels_per_hour / MINUTES_PER_HOUR
    start_minute = _minute_of_day(event.start)
    end_minute = _minute_of_day(event.end)

    return EventPosition(
        top=start_minute * scale,
        height=(end_minute - start_minute) * scale,
        left=column_index * column_width_percent,
        width=column_width_percent,
    )


def _wall_seconds(moment: datetime) -> float:
    # Seconds since the epoch on a naive wall-clock value.
    return (moment - _EPOCH).total_seconds()


def _span(event: Event) -> Tuple[float, float]:
    start_ts = _wall_seconds(parse_wall_clock(event.start))
    end_ts = _wall_seconds(parse_wall_clock(event.end))
    if end_ts <= start_ts:
        # Degenerate events still take up room; treat them as 30 minutes long.
        end_ts = start_ts + 30 * 60
    return start_ts, end_ts


def pack_columns(events: Sequence[Event]) -> Dict[str, Tuple[int, int]]:
    """
    Assign side-by-side columns to overlapping events.

    Returns a mapping of event id -> (column_index, column_count). Events are
    grouped into clusters of transitively overlapping intervals; inside a
    cluster each event takes the first column whose previous occupant has
    already ended, and every member of the cluster shares the cluster's
    column count. Non-overlapping events get (0, 1).

    This is opt-in. The default grid keeps every event in a single full-width
    column, so simultaneous events are drawn on top of each other.
    """
    spans = [(event, *_span(event)) for event in events]
    # Earliest first; on ties the longer event takes the leftmost column.
    spans.sort(key=lambda item: (item[1], item[1] - item[2]))

    clusters: List[List[Tuple[Event, float, float]]] = []
    cluster_end = float("-inf")
    for item in spans:
        _, start, end = item
        if clusters and start < cluster_end:
            clusters[-1].append(item)
            cluster_end = max(cluster_end, end)
        else:
            clusters.append([item])
            cluster_end = end

    layout: Dict[str, Tuple[int, int]] = {}
    for cluster in clusters:
        column_ends: List[float] = []
        assigned: Dict[str, int] = {}
        for event, start, end in cluster:
            for col_idx, col_end in enumerate(column_ends):
                if start >= col_end:
                    column_ends[col_idx] = end
                    assigned[event.id] = col_idx
                    break
            else:
                assigned[event.id] = len(column_ends)
                column_ends.append(end)

        total = len(column_ends)
        for event_id, col_idx in assigned.items():
            layout[event_id] = (col_idx, total)

    return layout


def format_time_label(hour: int) -> str:
    """
    Hour row label: 0 -> "12 AM", 9 -> "9 AM", 12 -> "12 PM", 15 -> "3 PM".
    """
    if hour == 0:
        return "12 AM"
    if hour == 12:
        return "12 PM"
    return f"{hour} AM" if hour < 12 else f"{hour - 12} PM"
