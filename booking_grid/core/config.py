from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global application configuration.

    Values are loaded from environment variables at runtime.

    These settings drive:
    - Grid scale (pixels per hour) used by the layout calculator
    - Default colour for events whose service cannot be resolved
    - Logging verbosity
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "Booking Grid"
    APP_ENV: str = Field("local", description="Environment name: local/dev/stage/prod")

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level for the booking_grid loggers.",
    )

    # --- Grid rendering ---
    PIXELS_PER_HOUR: int = Field(
        default=60,
        gt=0,
        description="Vertical scale of the time grid. 60 means 1 minute == 1 pixel.",
    )
    DEFAULT_SERVICE_COLOR: str = Field(
        default="#333",
        description="Colour used when an event's serviceId has no matching service.",
    )
    DEFAULT_COLUMN_WIDTH_PERCENT: float = Field(
        default=100.0,
        gt=0,
        le=100,
        description="Column width used when overlapping events are not packed.",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Using LRU cache ensures settings are read and validated only once,
    while still being easily importable across the app.
    """
    return Settings()
