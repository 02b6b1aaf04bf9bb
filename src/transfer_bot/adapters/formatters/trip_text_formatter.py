"""Russian message templates for shuttle recommendations."""

from collections.abc import Iterable

from transfer_bot.domain.contracts.trip_text_formatter import TripTextFormatterProtocol
from transfer_bot.domain.models import (
    DepartureTime,
    Route,
    TripDirection,
    TripOutcome,
    TripRecommendation,
)

MONETIZATION_MESSAGE = (
    "Кстати, такси до Геологической можно заказать прямо из чата: просто напишите /taxi."
)

_ORIGIN = {
    TripDirection.TO_OFFICE: "от Геологической",
    TripDirection.FROM_OFFICE: "от офиса",
}


def _join_times(departures: Iterable[DepartureTime]) -> str:
    return ", ".join(str(departure) for departure in departures)


class TripTextFormatter(TripTextFormatterProtocol):
    """Renders recommendations with fixed Russian templates."""

    def __init__(self, monetization_message: str = MONETIZATION_MESSAGE) -> None:
        """Initialize the formatter.

        Args:
            monetization_message: Sponsor text appended to the taxi-related
                from-office answers.
        """
        self.monetization_message = monetization_message

    def format_recommendation(self, recommendation: TripRecommendation) -> str:
        """Render a recommendation with the template for its outcome."""
        if recommendation.outcome is TripOutcome.TWO_TRIPS:
            return self.format_two_trips(recommendation)
        if recommendation.outcome is TripOutcome.LAST_TRIP:
            return self.format_last_trip(recommendation)
        return self.format_none_today(recommendation)

    def format_two_trips(self, recommendation: TripRecommendation) -> str:
        first, second = recommendation.departures[:2]
        origin = _ORIGIN[recommendation.direction]
        return f"Ближайший дежурный рейс {origin} будет в {first}. Следующий - в {second}."

    def format_last_trip(self, recommendation: TripRecommendation) -> str:
        only = recommendation.departures[0]
        origin = _ORIGIN[recommendation.direction]
        text = f"Ближайший дежурный рейс {origin} будет в {only}. Это последний на сегодня рейс"
        if recommendation.direction is TripDirection.FROM_OFFICE:
            return f"{text}, дальше - только на такси. {self.monetization_message}"
        return f"{text}."

    def format_none_today(self, recommendation: TripRecommendation) -> str:
        if recommendation.direction is TripDirection.FROM_OFFICE:
            return (
                "В ближайшие несколько часов уехать домой на трансфере не получится :( "
                "Придется остаться в офисе или ехать на такси. "
                f"{self.monetization_message}"
            )
        return (
            "В ближайшие несколько часов уехать на работу на трансфере не получится. "
            "Лучше лечь поспать и поехать с утра. "
            f"Первые рейсы {_ORIGIN[TripDirection.TO_OFFICE]}: "
            f"{_join_times(recommendation.next_day_departures)}."
        )

    def format_full_schedule(
        self, work_day_route: Route, holiday_route: Route, direction: TripDirection
    ) -> tuple[str, str]:
        """Render both timetables of a direction, one time per line."""
        origin = _ORIGIN[direction]
        return (
            self._format_route_block(f"Дежурные рейсы {origin} в будни:", work_day_route),
            self._format_route_block(f"Дежурные рейсы {origin} в выходные:", holiday_route),
        )

    @staticmethod
    def _format_route_block(header: str, route: Route) -> str:
        lines = [header, *(str(departure) for departure in route)]
        return "".join(f"{line}\n" for line in lines)
