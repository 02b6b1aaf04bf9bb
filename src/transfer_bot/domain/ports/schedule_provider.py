"""Schedule provider port."""

from typing import Protocol

from transfer_bot.domain.models.schedule import Schedule


class ScheduleProvider(Protocol):
    """Port for reading the schedule that is currently in effect."""

    def current(self) -> Schedule:
        """Return the active schedule. Never a partially loaded one."""
        ...
