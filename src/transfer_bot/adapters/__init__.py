"""Adapters layer - configuration, text rendering and schedule storage."""

from transfer_bot.adapters.config import AppConfig, ScheduleLoader, parse_schedule
from transfer_bot.adapters.formatters import TripTextFormatter
from transfer_bot.adapters.schedule_store import ScheduleStore

__all__ = [
    "AppConfig",
    "ScheduleLoader",
    "ScheduleStore",
    "TripTextFormatter",
    "parse_schedule",
]
