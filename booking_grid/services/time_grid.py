from __future__ import annotations

import calendar
from datetime import date, timedelta

from booking_grid.schemas.grid import CalendarView

MONTH_GRID_SIZE = 42  # 6 rows x 7 days
HOURS_PER_DAY = 24


def _sunday_index(day: date) -> int:
    """
    Weekday index with 0=Sunday .. 6=Saturday (Python's weekday() is Monday=0).
    """
    return (day.weekday() + 1) % 7


def start_of_week(day: date) -> date:
    """
    Most recent Sunday on or before `day`.
    """
    return day - timedelta(days=_sunday_index(day))


def days_to_display(anchor_date: date, view: CalendarView | str) -> list[date]:
    """
    Ordered dates to render for `view` around `anchor_date`.

    - day:   [anchor_date], returned unchanged
    - week:  7 dates starting at the Sunday on/before the anchor
    - month: 42 dates (6 full Sunday..Saturday rows) with previous/next month
             padding around every day of the anchor's month
    """
    view = CalendarView(view)

    if view is CalendarView.DAY:
        return [anchor_date]

    if view is CalendarView.WEEK:
        start = start_of_week(anchor_date)
        return [start + timedelta(days=i) for i in range(7)]

    first_day = date(anchor_date.year, anchor_date.month, 1)
    lead = _sunday_index(first_day)
    days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
    trailing = MONTH_GRID_SIZE - lead - days_in_month

    days = [first_day - timedelta(days=i) for i in range(lead, 0, -1)]
    days.extend(first_day + timedelta(days=i) for i in range(days_in_month))
    last_day = days[-1]
    days.extend(last_day + timedelta(days=i) for i in range(1, trailing + 1))
    return days


def time_slots() -> list[int]:
    """
    Hour rows of the time grid: always 0..23, independent of view.
    """
    return list(range(HOURS_PER_DAY))


def _shift_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last))


def go_to_previous(anchor_date: date, view: CalendarView | str) -> date:
    """
    Anchor for the previous page: -1 day, -7 days or -1 month.
    """
    view = CalendarView(view)
    if view is CalendarView.DAY:
        return anchor_date - timedelta(days=1)
    if view is CalendarView.WEEK:
        return anchor_date - timedelta(days=7)
    return _shift_months(anchor_date, -1)


def go_to_next(anchor_date: date, view: CalendarView | str) -> date:
    """
    Anchor for the next page: +1 day, +7 days or +1 month.
    """
    view = CalendarView(view)
    if view is CalendarView.DAY:
        return anchor_date + timedelta(days=1)
    if view is CalendarView.WEEK:
        return anchor_date + timedelta(days=7)
    return _shift_months(anchor_date, 1)


def view_title(anchor_date: date, view: CalendarView | str) -> str:
    """
    Header label, e.g. "May 10, 2025", "Week of May 10, 2025" or "May 2025".

    Like the calendar header, the week title is built from the anchor itself,
    not from the start of the week.
    """
    view = CalendarView(view)
    month_name = calendar.month_name[anchor_date.month]
    if view is CalendarView.MONTH:
        return f"{month_name} {anchor_date.year}"

    label = f"{month_name} {anchor_date.day}, {anchor_date.year}"
    if view is CalendarView.WEEK:
        return f"Week of {label}"
    return label
