from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventStatus(str, Enum):
    """
    Booking outcome of an appointment.

    Presentation only: the grid engine lays out and locates events the same
    way regardless of status.
    """

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class Event(BaseModel):
    """
    A single bookable appointment as supplied by the host application.

    `start` and `end` are kept as ISO-8601 local-time strings, exactly as the
    booking flow stores them. They are parsed lazily by the engine so that a
    malformed timestamp surfaces where it is used, not at construction.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Stable unique identifier of the event.", examples=["evt-1"])
    title: str = Field(..., description="Display label.", examples=["Business Consultation"])
    service_id: str = Field(
        ...,
        alias="serviceId",
        description="Reference to a Service. Dangling references fall back to the default colour.",
        examples=["svc-1"],
    )
    start: str = Field(
        ...,
        description="ISO-8601 local start time.",
        examples=["2025-05-10T10:00:00"],
    )
    end: str = Field(
        ...,
        description="ISO-8601 local end time. Expected to be after `start` (not validated).",
        examples=["2025-05-10T11:30:00"],
    )
    client_name: str = Field(
        "",
        alias="clientName",
        description="Free-text name of the client who booked the appointment.",
        examples=["Jane Doe"],
    )
    status: EventStatus = Field(
        EventStatus.SCHEDULED,
        description="Booking status. Affects presentation only.",
        examples=["scheduled"],
    )


class Service(BaseModel):
    """
    A booking category. Only `color` matters to the grid (event tint).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., examples=["svc-1"])
    name: str = Field(..., examples=["Business Consultation"])
    color: str = Field("", description="CSS colour used to tint events.", examples=["#10b981"])
