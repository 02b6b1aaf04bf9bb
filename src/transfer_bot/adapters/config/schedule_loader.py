"""Schedule document parsing and loading."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from transfer_bot.adapters.config.app_config import AppConfig
from transfer_bot.domain.errors import ScheduleParseError
from transfer_bot.domain.models import DepartureTime, Route, Schedule

logger = logging.getLogger(__name__)


class ScheduleDocument(BaseModel):
    """Shape of the schedule document; unknown keys are ignored, missing ones are empty."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    work_day_route_to_office: list[str] = Field(default_factory=list, alias="WorkDayRouteToOffice")
    holiday_route_to_office: list[str] = Field(default_factory=list, alias="HolidayRouteToOffice")
    work_day_route_from_office: list[str] = Field(
        default_factory=list, alias="WorkDayRouteFromOffice"
    )
    holiday_route_from_office: list[str] = Field(
        default_factory=list, alias="HolidayRouteFromOffice"
    )

    @field_validator(
        "work_day_route_to_office",
        "holiday_route_to_office",
        "work_day_route_from_office",
        "holiday_route_from_office",
        mode="before",
    )
    @classmethod
    def empty_when_null(cls, v: object) -> object:
        """Treat an explicit null the same as a missing key."""
        return [] if v is None else v

    @field_validator(
        "work_day_route_to_office",
        "holiday_route_to_office",
        "work_day_route_from_office",
        "holiday_route_from_office",
    )
    @classmethod
    def validate_times(cls, v: list[str]) -> list[str]:
        """Validate every entry is an HH:MM time."""
        for entry in v:
            DepartureTime.parse(entry)
        return v

    def to_schedule(self) -> Schedule:
        return Schedule(
            work_day_route_to_office=_to_route(self.work_day_route_to_office),
            holiday_route_to_office=_to_route(self.holiday_route_to_office),
            work_day_route_from_office=_to_route(self.work_day_route_from_office),
            holiday_route_from_office=_to_route(self.holiday_route_from_office),
        )


def _to_route(entries: list[str]) -> Route:
    return Route(tuple(DepartureTime.parse(entry) for entry in entries))


def parse_schedule(data: bytes | str) -> Schedule:
    """Parse a YAML (or JSON) schedule document.

    Raises:
        ScheduleParseError: If the document is malformed or any entry is not a valid time.
            No partially filled schedule is ever returned.
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ScheduleParseError(f"Schedule is not valid YAML: {e}") from e

    if document is None:
        raise ScheduleParseError("Schedule document is empty")
    if not isinstance(document, dict):
        raise ScheduleParseError(
            f"Schedule document must be a mapping, got {type(document).__name__}"
        )

    try:
        return ScheduleDocument.model_validate(document).to_schedule()
    except ValidationError as e:
        raise ScheduleParseError(f"Invalid schedule: {e}") from e


class ScheduleLoader:
    """Loads the shuttle schedule from disk."""

    @staticmethod
    def load_file(path: str | Path) -> Schedule:
        """Read and parse a schedule file."""
        schedule_path = Path(path)
        if not schedule_path.exists():
            raise FileNotFoundError(f"Schedule file not found: {schedule_path}")

        schedule = parse_schedule(schedule_path.read_bytes())
        logger.info(
            f"Loaded schedule from {schedule_path}: "
            f"to office {len(schedule.work_day_route_to_office)} workday / "
            f"{len(schedule.holiday_route_to_office)} holiday, "
            f"from office {len(schedule.work_day_route_from_office)} workday / "
            f"{len(schedule.holiday_route_from_office)} holiday"
        )
        return schedule

    @staticmethod
    def load(config: AppConfig) -> Schedule:
        """Load the schedule file named in the app config."""
        return ScheduleLoader.load_file(config.schedule_file)
