"""Trip recommendation domain model."""

from dataclasses import dataclass
from enum import Enum

from transfer_bot.domain.models.departure_time import DepartureTime
from transfer_bot.domain.models.trip_direction import TripDirection


class TripOutcome(Enum):
    """Category of a recommendation; each one has its own text template."""

    TWO_TRIPS = "two_trips"
    LAST_TRIP = "last_trip"
    NONE_TODAY = "none_today"


@dataclass(frozen=True)
class TripRecommendation:
    """The departures selected for a rider at a given moment."""

    direction: TripDirection
    outcome: TripOutcome
    departures: tuple[DepartureTime, ...] = ()
    next_day_departures: tuple[DepartureTime, ...] = ()  # only filled for to-office NONE_TODAY
