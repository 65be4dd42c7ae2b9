from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from booking_grid.core.config import get_settings


router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """
    Liveness payload, plus the grid scale the service is configured with so a
    renderer can confirm its row height matches.
    """

    status: str = Field(..., examples=["ok"])
    app_name: str = Field(..., examples=["Booking Grid"])
    environment: str = Field(
        ...,
        description="Deployment environment (local/dev/stage/prod).",
        examples=["local"],
    )
    pixels_per_hour: int = Field(
        ...,
        description="Vertical scale used for event geometry.",
        examples=[60],
    )
    timestamp_utc: datetime = Field(..., examples=["2025-05-10T10:30:00Z"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check for the Booking Grid service",
    description=(
        "Lightweight probe for load balancers and uptime checks.\n\n"
        "The grid engine is pure and keeps no state, so a successful response "
        "means every calendar endpoint can serve requests."
    ),
)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="ok",
        app_name=settings.APP_NAME,
        environment=settings.APP_ENV,
        pixels_per_hour=settings.PIXELS_PER_HOUR,
        timestamp_utc=datetime.now(tz=timezone.utc),
    )
