from datetime import date
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from booking_grid.schemas.event import Event


class CalendarView(str, Enum):
    """
    Selects which day-set the time grid model produces.
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class CellKey(NamedTuple):
    """
    Identity of a droppable grid cell: column (day) index and hour row.
    """

    day_index: int
    hour: int


class DropTarget(NamedTuple):
    """
    Payload carried by a droppable cell: the calendar date and hour it represents.
    """

    day: date
    hour: int


class GridModel(BaseModel):
    """
    Base for grid payloads serialized with camelCase keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventPosition(GridModel):
    """
    Geometry of an event block inside a day column.

    `top` and `height` are pixels from the top of the column; `left` and
    `width` are percentages of the column width.
    """

    top: float = Field(..., examples=[600])
    height: float = Field(..., examples=[90])
    left: float = Field(0.0, examples=[0])
    width: float = Field(100.0, examples=[100])

    def as_style(self) -> dict[str, str]:
        """
        Render as CSS property values, e.g. {"top": "600px", "left": "0%"}.
        """
        return {
            "top": f"{self.top:g}px",
            "height": f"{self.height:g}px",
            "left": f"{self.left:g}%",
            "width": f"{self.width:g}%",
        }


class PositionedEvent(GridModel):
    """
    An event placed in a grid cell, with its resolved tint and (for time
    grids) its geometry.
    """

    event: Event
    color: str = Field(..., examples=["#10b981"])
    service_name: str | None = Field(
        None,
        description="Name of the referenced service; None when the reference dangles.",
        examples=["Business Consultation"],
    )
    status_classes: str = Field(
        ...,
        description="Style classes for the status badge.",
        examples=["bg-blue-100 text-blue-800 border-blue-300"],
    )
    position: EventPosition | None = Field(
        None,
        description="Pixel geometry. None in month view, which is date-granular.",
    )
    style: dict[str, str] | None = Field(
        None,
        description="`position` rendered as CSS values, e.g. {\"top\": \"600px\"}.",
    )


class GridCell(GridModel):
    """
    One cell of the rendered grid.

    For day/week views a cell is a (day, hour) pair; for month view it is a
    whole day and `hour` is None.
    """

    day_index: int = Field(..., ge=0, examples=[0])
    day: date = Field(..., examples=["2025-05-10"])
    hour: int | None = Field(None, ge=0, le=23, examples=[10])
    in_current_month: bool = True
    events: list[PositionedEvent] = Field(default_factory=list)


class CalendarGrid(GridModel):
    """
    Everything a renderer needs to paint one view of the calendar.
    """

    view: CalendarView
    anchor_date: date
    title: str = Field(..., examples=["Week of May 4, 2025"])
    days: list[date]
    hours: list[int]
    cells: list[GridCell]
    previous_anchor: date
    next_anchor: date
