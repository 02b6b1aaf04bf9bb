"""Departure time domain model."""

import re
from dataclasses import dataclass
from datetime import datetime, time

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


@dataclass(frozen=True, order=True)
class DepartureTime:
    """A time of day at which a shuttle departs (no date component)."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")

    @classmethod
    def parse(cls, value: str) -> "DepartureTime":
        """Parse a 24-hour 'HH:MM' string (a single-digit hour is accepted)."""
        match = _TIME_PATTERN.fullmatch(value)
        if not match or int(match.group(1)) > 23 or int(match.group(2)) > 59:
            raise ValueError(f"'{value}' is not a valid HH:MM time")
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def as_time(self) -> time:
        """Return the equivalent datetime.time."""
        return time(self.hour, self.minute)

    def is_after(self, moment: datetime) -> bool:
        """Check whether this departure is strictly later than the moment's time of day."""
        return self.as_time() > moment.time()

    def seconds_after(self, moment: datetime) -> int:
        """Seconds from the moment's time of day until this departure, on the same day."""
        moment_seconds = moment.hour * 3600 + moment.minute * 60 + moment.second
        return (self.hour * 3600 + self.minute * 60) - moment_seconds

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
