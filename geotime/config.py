"""Library configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Geotime settings loaded from environment variables.

    Settings are loaded in this priority order (highest to lowest):
    1. Environment variables (prefixed with ``GEOTIME_``)
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Display
    # =========================================================================
    default_pattern: str = Field(
        default="%Y-%m-%dT%H:%M:%SZ",
        description="strftime pattern used when display() is called without one",
    )

    # =========================================================================
    # Magnitude tier
    # =========================================================================
    # Beyond this many years the "N <unit> years" text stops being useful and
    # the raw millisecond value is shown instead.
    magnitude_max_years: float = Field(
        default=1e15,
        gt=0,
        description="Largest number of years rendered as an approximation",
    )


settings = Settings()
