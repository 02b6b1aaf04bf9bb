"""In-memory holder for the schedule in effect."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from transfer_bot.domain.errors import ScheduleParseError
from transfer_bot.domain.ports.schedule_provider import ScheduleProvider

if TYPE_CHECKING:
    from transfer_bot.domain.models.schedule import Schedule

logger = logging.getLogger(__name__)


class ScheduleStore(ScheduleProvider):
    """Publishes whole schedules; readers always see one complete instance.

    Reads take no lock. Writers are serialised so two reloads cannot interleave.
    """

    def __init__(self, schedule: Schedule) -> None:
        """Initialize the store with the schedule loaded at startup."""
        self._schedule = schedule
        self._write_lock = threading.Lock()

    def current(self) -> Schedule:
        """Return the schedule currently in effect."""
        return self._schedule

    def replace(self, schedule: Schedule) -> None:
        """Publish a new schedule instance."""
        with self._write_lock:
            self._schedule = schedule

    def reload(self, loader: Callable[[], Schedule]) -> Schedule:
        """Load a fresh schedule and publish it.

        If loading fails the previous schedule stays in effect and the error is re-raised.
        """
        with self._write_lock:
            try:
                schedule = loader()
            except (ScheduleParseError, OSError) as e:
                logger.error(f"Schedule reload failed, keeping the previous schedule: {e}")
                raise
            self._schedule = schedule
        logger.info("Schedule reloaded")
        return schedule
