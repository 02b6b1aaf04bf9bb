"""Shared fixtures: the reference timetable used across the test suite."""

import pytest

from transfer_bot.adapters.config import parse_schedule
from transfer_bot.domain.models import Schedule

SCHEDULE_YAML = b"""WorkDayRouteToOffice:
  - "07:30"
  - "08:00"
  - "20:00"
  - "20:30"
HolidayRouteToOffice:
  - "10:30"
WorkDayRouteFromOffice:
  - "08:20"
  - "08:50"
  - "20:20"
  - "20:50"
HolidayRouteFromOffice:
  - "18:00"
"""


@pytest.fixture
def schedule_yaml() -> bytes:
    return SCHEDULE_YAML


@pytest.fixture
def schedule() -> Schedule:
    return parse_schedule(SCHEDULE_YAML)
