"""Domain layer - timetable model and business rules."""

from transfer_bot.domain.errors import ScheduleParseError
from transfer_bot.domain.models import (
    DayClass,
    DepartureTime,
    Route,
    Schedule,
    TripDirection,
)
from transfer_bot.domain.ports import ScheduleProvider

__all__ = [
    "DayClass",
    "DepartureTime",
    "Route",
    "Schedule",
    "ScheduleParseError",
    "ScheduleProvider",
    "TripDirection",
]
