from datetime import date

from pydantic import Field

from booking_grid.schemas.event import Event, Service
from booking_grid.schemas.grid import CalendarView, GridModel


class GridRequest(GridModel):
    """
    Input of the render path: the caller's events and services plus the page
    to render.
    """

    events: list[Event] = Field(default_factory=list)
    services: list[Service] = Field(default_factory=list)
    anchor_date: date = Field(..., examples=["2025-05-10"])
    view: CalendarView = Field(CalendarView.WEEK, examples=["week"])
    pack_overlaps: bool = Field(
        False,
        description=(
            "Lay overlapping events out side by side. When false (default) "
            "every event uses the full column width and simultaneous events overlap."
        ),
    )


class RescheduleRequest(GridModel):
    """
    A drop of `event` onto the (dropDate, dropHour) cell.
    """

    event: Event
    drop_date: date = Field(..., examples=["2025-05-12"])
    drop_hour: int = Field(..., ge=0, le=23, examples=[14])


class DaysResponse(GridModel):
    """
    Day set and navigation for a page, without any events.
    """

    view: CalendarView
    anchor_date: date
    title: str
    days: list[date]
    hours: list[int]
    hour_labels: list[str]
    previous_anchor: date
    next_anchor: date
