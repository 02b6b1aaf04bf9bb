"""Domain models for the shuttle timetable."""

from transfer_bot.domain.models.day_class import DayClass, classify_day
from transfer_bot.domain.models.departure_time import DepartureTime
from transfer_bot.domain.models.route import Route
from transfer_bot.domain.models.schedule import Schedule
from transfer_bot.domain.models.trip_direction import TripDirection
from transfer_bot.domain.models.trip_recommendation import TripOutcome, TripRecommendation

__all__ = [
    "DayClass",
    "DepartureTime",
    "Route",
    "Schedule",
    "TripDirection",
    "TripOutcome",
    "TripRecommendation",
    "classify_day",
]
