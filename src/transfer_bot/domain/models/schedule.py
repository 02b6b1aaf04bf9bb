"""Schedule domain model."""

from dataclasses import dataclass, field

from transfer_bot.domain.models.day_class import DayClass
from transfer_bot.domain.models.route import Route
from transfer_bot.domain.models.trip_direction import TripDirection


@dataclass(frozen=True)
class Schedule:
    """The weekly shuttle timetable: one route per day class and direction."""

    work_day_route_to_office: Route = field(default_factory=Route)
    holiday_route_to_office: Route = field(default_factory=Route)
    work_day_route_from_office: Route = field(default_factory=Route)
    holiday_route_from_office: Route = field(default_factory=Route)

    def route_for(self, day_class: DayClass, direction: TripDirection) -> Route:
        """Return the route for a day class and direction."""
        if direction is TripDirection.TO_OFFICE:
            if day_class is DayClass.WORKDAY:
                return self.work_day_route_to_office
            return self.holiday_route_to_office
        if day_class is DayClass.WORKDAY:
            return self.work_day_route_from_office
        return self.holiday_route_from_office
