"""Protocol for rendering trip recommendations and timetables as text."""

from typing import Protocol

from transfer_bot.domain.models.route import Route
from transfer_bot.domain.models.trip_direction import TripDirection
from transfer_bot.domain.models.trip_recommendation import TripRecommendation


class TripTextFormatterProtocol(Protocol):
    """Protocol for turning domain results into messages for a rider."""

    def format_recommendation(self, recommendation: TripRecommendation) -> str:
        """Render a best-trip recommendation.

        Args:
            recommendation: The selected departures and their outcome category.

        Returns:
            A single message, e.g. "Ближайший дежурный рейс от офиса будет в 08:20. ..."
        """
        ...

    def format_full_schedule(
        self, work_day_route: Route, holiday_route: Route, direction: TripDirection
    ) -> tuple[str, str]:
        """Render the workday and holiday timetables of one direction.

        Args:
            work_day_route: Route used Monday to Friday.
            holiday_route: Route used on weekends.
            direction: Direction both routes travel in.

        Returns:
            Two blocks (workday first), each a header followed by one time per line.
        """
        ...
