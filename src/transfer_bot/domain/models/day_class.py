"""Day class domain model."""

from datetime import datetime
from enum import Enum


class DayClass(Enum):
    """Which timetable variant applies to a calendar day."""

    WORKDAY = "workday"
    HOLIDAY = "holiday"


def classify_day(moment: datetime) -> DayClass:
    """Saturday and Sunday are holidays, Monday to Friday are workdays.

    Public holidays are not taken into account.
    """
    if moment.weekday() >= 5:
        return DayClass.HOLIDAY
    return DayClass.WORKDAY
