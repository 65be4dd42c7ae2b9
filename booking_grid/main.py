from fastapi import FastAPI

from booking_grid.api.routes import calendar, health
from booking_grid.core.config import get_settings
from booking_grid.core.logging import configure_logging


def create_app() -> FastAPI:
    """
    Application factory for the Booking Grid service.
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Calendar time-grid engine for the booking application.\n"
            "Turns appointment events into day/week/month grids with pixel layout,\n"
            "and recomputes start/end times when an event is dragged to a new slot."
        ),
        version="0.1.0",
    )

    app.include_router(health.router)
    app.include_router(calendar.router)

    return app


app = create_app()
