import logging
from datetime import date as date_type
from http import HTTPStatus

from fastapi import APIRouter, HTTPException, Query

from booking_grid.core.config import get_settings
from booking_grid.schemas.calendar import DaysResponse, GridRequest, RescheduleRequest
from booking_grid.schemas.event import Event
from booking_grid.schemas.grid import CalendarGrid, CalendarView
from booking_grid.services.drag_reschedule import reschedule
from booking_grid.services.grid_builder import build_grid
from booking_grid.services.layout_calculator import format_time_label
from booking_grid.services.time_grid import (
    days_to_display,
    go_to_next,
    go_to_previous,
    time_slots,
    view_title,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.post(
    "/grid",
    response_model=CalendarGrid,
    status_code=HTTPStatus.OK,
    summary="Build the calendar grid for a day, week or month page",
    description=(
        "Lay out the supplied events on the grid for `view` around `anchorDate`.\n\n"
        "- **day / week**: one cell per day x hour (0-23). Each event appears in the "
        "cell of its start hour with pixel geometry (60 px per hour by default).\n"
        "- **month**: one cell per day for 6 full weeks (42 cells), with every "
        "event starting that day.\n\n"
        "Events referencing an unknown service are tinted with the default colour."
    ),
    responses={
        422: {
            "description": "Validation error, e.g. an unparseable event timestamp.",
            "content": {
                "application/json": {
                    "example": {"detail": "Invalid isoformat string: 'tomorrow'"}
                }
            },
        },
    },
)
async def get_grid(payload: GridRequest) -> CalendarGrid:
    """
    Run the render pipeline for the requested page.
    """
    settings = get_settings()
    try:
        return build_grid(
            payload.events,
            payload.services,
            payload.anchor_date,
            payload.view,
            pack_overlaps=payload.pack_overlaps,
            pixels_per_hour=settings.PIXELS_PER_HOUR,
            column_width_percent=settings.DEFAULT_COLUMN_WIDTH_PERCENT,
            default_color=settings.DEFAULT_SERVICE_COLOR,
        )
    except ValueError as exc:
        logger.warning("Rejected grid request: %s", exc)
        raise HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )


@router.post(
    "/reschedule",
    response_model=Event,
    status_code=HTTPStatus.OK,
    summary="Reschedule an event dropped onto a new day/hour cell",
    description=(
        "Compute the event's new start/end after a drag-and-drop onto "
        "(`dropDate`, `dropHour`). The new start is at minute 0 of the drop hour "
        "and the original duration is preserved.\n\n"
        "This endpoint is pure: the caller is responsible for persisting the "
        "returned event."
    ),
    responses={
        200: {
            "description": "Rescheduled event.",
            "content": {
                "application/json": {
                    "example": {
                        "id": "evt-1",
                        "title": "Business Consultation",
                        "serviceId": "svc-1",
                        "start": "2025-05-12T14:00:00",
                        "end": "2025-05-12T15:30:00",
                        "clientName": "Jane Doe",
                        "status": "scheduled",
                    }
                }
            },
        },
        422: {"description": "Validation error (hour out of range, bad timestamp)."},
    },
)
async def reschedule_event(payload: RescheduleRequest) -> Event:
    try:
        updated = reschedule(payload.event, payload.drop_hour, payload.drop_date)
    except ValueError as exc:
        logger.warning("Rejected reschedule of event %s: %s", payload.event.id, exc)
        raise HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )

    logger.info(
        "Event %s moved from %s to %s", updated.id, payload.event.start, updated.start
    )
    return updated


@router.get(
    "/days",
    response_model=DaysResponse,
    summary="Days, hour rows and navigation for a calendar page",
)
async def get_days(
    anchor_date: date_type = Query(
        ...,
        alias="anchorDate",
        description="Date the page is anchored on, in ISO format (YYYY-MM-DD).",
        examples=["2025-05-10"],
    ),
    view: CalendarView = Query(
        CalendarView.WEEK,
        description="Page granularity: day, week or month.",
    ),
) -> DaysResponse:
    """
    Return the day set for the page without laying out any events.

    Month pages have no hour rows.
    """
    hours = [] if view is CalendarView.MONTH else time_slots()
    return DaysResponse(
        view=view,
        anchor_date=anchor_date,
        title=view_title(anchor_date, view),
        days=days_to_display(anchor_date, view),
        hours=hours,
        hour_labels=[format_time_label(hour) for hour in hours],
        previous_anchor=go_to_previous(anchor_date, view),
        next_anchor=go_to_next(anchor_date, view),
    )
