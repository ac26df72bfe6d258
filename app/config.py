"""
Service configuration.

Values come from the environment with the CAMPAIGN_ENRICH_ prefix, e.g.
CAMPAIGN_ENRICH_PRODUCER_TIMEOUT_SECONDS=5.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnrichmentSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CAMPAIGN_ENRICH_",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = Field(default="campaign-enrichment", min_length=1)

    # Deadline applied to every producer call; None waits indefinitely
    producer_timeout_seconds: Optional[float] = Field(default=10.0)

    log_level: str = Field(default="INFO")

    @field_validator("producer_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("producer_timeout_seconds must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> EnrichmentSettings:
    return EnrichmentSettings()
