"""Application service answering rider questions about the shuttle."""

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from transfer_bot.application.services.route_selection import (
    DEFAULT_WAIT_HORIZON,
    recommend_trip,
)
from transfer_bot.domain.models import TripDirection

if TYPE_CHECKING:
    from transfer_bot.domain.contracts import TripTextFormatterProtocol
    from transfer_bot.domain.ports import ScheduleProvider

logger = logging.getLogger(__name__)


class ShuttleInfoService:
    """Produces the texts sent back to riders.

    The schedule is read from the provider on every call, so a reload published
    by the provider is picked up by the next query.
    """

    def __init__(
        self,
        schedule_provider: "ScheduleProvider",
        formatter: "TripTextFormatterProtocol",
        wait_horizon: timedelta = DEFAULT_WAIT_HORIZON,
    ) -> None:
        """Initialize the service.

        Args:
            schedule_provider: Source of the schedule currently in effect.
            formatter: Renders recommendations and timetables as text.
            wait_horizon: How far ahead a departure still counts as "soon".
        """
        self._schedule_provider = schedule_provider
        self._formatter = formatter
        self._wait_horizon = wait_horizon

    def best_trip_from_office_text(self, now: datetime) -> str:
        """Recommend the nearest trips from the office to the metro."""
        return self._best_trip_text(now, TripDirection.FROM_OFFICE)

    def best_trip_to_office_text(self, now: datetime) -> str:
        """Recommend the nearest trips from the metro to the office."""
        return self._best_trip_text(now, TripDirection.TO_OFFICE)

    def full_to_office_texts(self) -> tuple[str, str]:
        """Whole to-office timetable: workday block, then holiday block."""
        schedule = self._schedule_provider.current()
        return self._formatter.format_full_schedule(
            schedule.work_day_route_to_office,
            schedule.holiday_route_to_office,
            TripDirection.TO_OFFICE,
        )

    def full_from_office_texts(self) -> tuple[str, str]:
        """Whole from-office timetable: workday block, then holiday block."""
        schedule = self._schedule_provider.current()
        return self._formatter.format_full_schedule(
            schedule.work_day_route_from_office,
            schedule.holiday_route_from_office,
            TripDirection.FROM_OFFICE,
        )

    def _best_trip_text(self, now: datetime, direction: TripDirection) -> str:
        recommendation = recommend_trip(
            self._schedule_provider.current(), now, direction, self._wait_horizon
        )
        logger.debug(
            f"Recommendation for {direction.value} at {now:%d.%m.%Y %H:%M}: "
            f"{recommendation.outcome.value}"
        )
        return self._formatter.format_recommendation(recommendation)
