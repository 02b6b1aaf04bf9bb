"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transfer_bot.adapters.formatters.trip_text_formatter import MONETIZATION_MESSAGE


def _check_max_wait_hours(value: object) -> float:
    try:
        value = float(value)  # type: ignore[arg-type]
    except TypeError as e:
        raise ValueError(f"max_wait_hours must be a number, got {value!r}") from e
    if value <= 0:
        raise ValueError("max_wait_hours must be greater than 0")
    return value


def _check_timezone(value: object) -> str:
    if not isinstance(value, str):
        raise ValueError(f"timezone must be a string, got {value!r}")
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {value}") from e
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Schedule
    schedule_file: str = Field(
        default="schedule.yaml",
        description="Path to the YAML document holding the four shuttle routes",
    )
    max_wait_hours: float = Field(
        default=3.0,
        description="Departures further away than this are not offered as the nearest trip",
    )

    # Bot behaviour
    timezone: str = Field(
        default="Asia/Yekaterinburg",
        description="Timezone the timetable is written in (IANA timezone name)",
    )
    monetization_message: str = Field(
        default=MONETIZATION_MESSAGE,
        description="Sponsor text appended to taxi-related answers",
    )
    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    # Optional TOML file overriding the settings above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [schedule] and [bot] sections",
    )

    @field_validator("max_wait_hours")
    @classmethod
    def validate_max_wait_hours(cls, v: float) -> float:
        """Validate the wait horizon is positive."""
        return _check_max_wait_hours(v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        return _check_timezone(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard names."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file, if configured, and apply its settings.

        Returns the parsed TOML data (empty when no file is configured).
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        schedule = toml_data.get("schedule", {})
        if "file" in schedule:
            self.schedule_file = str(schedule["file"])
        if "max_wait_hours" in schedule:
            self.max_wait_hours = _check_max_wait_hours(schedule["max_wait_hours"])

        bot = toml_data.get("bot", {})
        if "timezone" in bot:
            self.timezone = _check_timezone(bot["timezone"])
        if "monetization_message" in bot:
            self.monetization_message = bot["monetization_message"]

        return toml_data

    @property
    def wait_horizon(self) -> timedelta:
        return timedelta(hours=self.max_wait_hours)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
