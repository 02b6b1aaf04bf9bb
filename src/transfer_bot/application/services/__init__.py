"""Application services (use cases)."""

from transfer_bot.application.services.route_selection import (
    DEFAULT_WAIT_HORIZON,
    find_correct_route,
    recommend_trip,
    upcoming_departures,
)
from transfer_bot.application.services.shuttle_info_service import ShuttleInfoService

__all__ = [
    "DEFAULT_WAIT_HORIZON",
    "ShuttleInfoService",
    "find_correct_route",
    "recommend_trip",
    "upcoming_departures",
]
