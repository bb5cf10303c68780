"""Application configuration and environment helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_HISTORY_MONTHS = 3
DEFAULT_SPARKLINE_POINTS = 26
DEFAULT_MAX_HISTORY_DAYS = 3660


class AppSettings(BaseSettings):
    """Configuration options for the Market Pulse scoring service."""

    app_name: str = Field(default="Market Pulse")
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="Trading-calendar anchor used to attribute a market close to a calendar day.",
    )
    history_months: int = Field(
        default=DEFAULT_HISTORY_MONTHS,
        ge=1,
        description="Number of whole months the default history window reaches back.",
    )
    sparkline_points: int = Field(default=DEFAULT_SPARKLINE_POINTS, ge=1)
    max_history_days: int = Field(
        default=DEFAULT_MAX_HISTORY_DAYS,
        ge=1,
        description="Largest number of calendar days a single history request may span.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="market-pulse")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_prefix="MARKET_PULSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the timezone resolves to an IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {v!r}") from exc
        return v

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"telemetry_otlp_endpoint"}
        return {k: ("***" if k in hidden and v else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """Return cached application settings with optional overrides."""

    if overrides:
        return AppSettings(**overrides)
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_TIMEZONE",
    "DEFAULT_HISTORY_MONTHS",
    "DEFAULT_SPARKLINE_POINTS",
    "DEFAULT_MAX_HISTORY_DAYS",
    "get_settings",
]
