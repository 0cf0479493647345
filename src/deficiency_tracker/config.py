"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from deficiency_tracker.domain.nutrients import DemographicGroup

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_demographic: str = DemographicGroup.ADULT_FEMALE.value
    timezone: str = "UTC"
    store_timeout_seconds: int = 10
    fast_track_default: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_demographic(raw: str | None, default: DemographicGroup) -> DemographicGroup:
    """Parse a demographic group from config or a query string."""
    if raw is None:
        return default
    cleaned = raw.strip()
    if not cleaned:
        return default
    for group in DemographicGroup:
        if cleaned.lower() in {group.value.lower(), group.name.lower()}:
            return group
    raise ValueError(f"Unknown demographic group: {raw!r}")
