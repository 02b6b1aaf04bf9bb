"""Time-based route selection over a shuttle schedule."""

import logging
from datetime import datetime, timedelta

from transfer_bot.domain.models import (
    DepartureTime,
    Route,
    Schedule,
    TripDirection,
    TripOutcome,
    TripRecommendation,
    classify_day,
)

logger = logging.getLogger(__name__)

DEFAULT_WAIT_HORIZON = timedelta(hours=3)
FIRST_TRIPS_COUNT = 3


def find_correct_route(schedule: Schedule, moment: datetime, to_office: bool) -> Route:
    """Pick the route that applies on the moment's day for the given direction."""
    return schedule.route_for(classify_day(moment), TripDirection.from_flag(to_office))


def upcoming_departures(
    route: Route, moment: datetime, horizon: timedelta = DEFAULT_WAIT_HORIZON
) -> list[DepartureTime]:
    """Departures still ahead today, or none if the nearest one is beyond the horizon.

    Returned earliest first, whatever order the route was configured in. Only
    the current day is considered; late at night the route does not roll over
    to the next morning.
    """
    remaining = sorted(route.departures_after(moment))
    if remaining and remaining[0].seconds_after(moment) > horizon.total_seconds():
        logger.debug(
            f"Nearest departure {remaining[0]} is more than {horizon} after {moment:%H:%M}"
        )
        return []
    return remaining


def recommend_trip(
    schedule: Schedule,
    moment: datetime,
    direction: TripDirection,
    horizon: timedelta = DEFAULT_WAIT_HORIZON,
) -> TripRecommendation:
    """Select the best departures for a rider travelling in `direction` at `moment`.

    When nothing is left for a trip to the office, the first departures of the
    calendar day after `moment` are suggested. After midnight that is the
    following day, not the morning that has just begun.
    """
    route = find_correct_route(schedule, moment, direction is TripDirection.TO_OFFICE)
    remaining = upcoming_departures(route, moment, horizon)

    if len(remaining) >= 2:
        return TripRecommendation(
            direction=direction,
            outcome=TripOutcome.TWO_TRIPS,
            departures=tuple(remaining[:2]),
        )
    if len(remaining) == 1:
        return TripRecommendation(
            direction=direction,
            outcome=TripOutcome.LAST_TRIP,
            departures=(remaining[0],),
        )

    next_day_departures: tuple[DepartureTime, ...] = ()
    if direction is TripDirection.TO_OFFICE:
        next_day_route = find_correct_route(schedule, moment + timedelta(days=1), True)
        next_day_departures = tuple(next_day_route.first(FIRST_TRIPS_COUNT))
    return TripRecommendation(
        direction=direction,
        outcome=TripOutcome.NONE_TODAY,
        next_day_departures=next_day_departures,
    )
