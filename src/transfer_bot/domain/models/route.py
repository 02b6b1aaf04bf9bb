"""Route domain model."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from transfer_bot.domain.models.departure_time import DepartureTime


@dataclass(frozen=True)
class Route:
    """Ordered departures for one direction and one day class.

    Entries keep the order they were configured in and are read as ascending
    within the day.
    """

    departures: tuple[DepartureTime, ...] = ()

    def __iter__(self) -> Iterator[DepartureTime]:
        return iter(self.departures)

    def __len__(self) -> int:
        return len(self.departures)

    def __getitem__(self, index: int) -> DepartureTime:
        return self.departures[index]

    def departures_after(self, moment: datetime) -> list[DepartureTime]:
        """Departures strictly later than the moment's time of day."""
        return [departure for departure in self.departures if departure.is_after(moment)]

    def first(self, count: int) -> list[DepartureTime]:
        """The earliest `count` departures of the day."""
        return sorted(self.departures)[:count]

    def __str__(self) -> str:
        return ", ".join(str(departure) for departure in self.departures)
