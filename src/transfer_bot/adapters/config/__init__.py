"""Configuration adapters."""

from transfer_bot.adapters.config.app_config import AppConfig
from transfer_bot.adapters.config.schedule_loader import ScheduleLoader, parse_schedule

__all__ = ["AppConfig", "ScheduleLoader", "parse_schedule"]
