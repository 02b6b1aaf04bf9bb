"""Ports (interfaces) for the ports-and-adapters architecture."""

from transfer_bot.domain.ports.schedule_provider import ScheduleProvider

__all__ = ["ScheduleProvider"]
