"""Daily hike scheduling orchestration service."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from ...config import Settings, settings as default_settings
from ...models.domain import Animal, Coordinate, TrailCandidate, WeekDay
from ..calendar import date_for, start_of_week, weekday_for
from ..geospatial import is_valid_coordinate
from ..grouping.service import HikeGroup, group_into_hikes
from ..routing.models import Pickup, RouteStrategy
from ..routing.optimizer import optimize_route
from ..trails.service import filter_trails, suggest_trail
from .models import ComputedDailySchedule, ComputedHike
from .resolver import ExceptionLookup, scheduled_animals

logger = logging.getLogger(__name__)


def _active(animals: Sequence[Animal]) -> list[Animal]:
    return [animal for animal in animals if animal.is_active]


def _build_hike(
    group: HikeGroup,
    trails: Sequence[TrailCandidate],
    *,
    start: Coordinate | None,
    config: Settings,
) -> ComputedHike:
    routable = [animal for animal in group.animals if is_valid_coordinate(animal.location)]
    unrouted = tuple(animal for animal in group.animals if not is_valid_coordinate(animal.location))
    for animal in unrouted:
        logger.warning(f"Animal {animal.name} ({animal.animal_id}) has no pickup coordinate, left off the route")

    route = optimize_route(
        [Pickup(pickup_id=animal.animal_id, coordinate=animal.location) for animal in routable],
        start,
        strategy=RouteStrategy(config.route_strategy),
        exact_limit=config.exact_route_max_pickups,
    )
    by_id = {animal.animal_id: animal for animal in routable}
    ordered = tuple(by_id[pickup.pickup_id] for pickup in route.pickups)
    coordinates = tuple(route.coordinates)

    trail = suggest_trail(coordinates[-1] if coordinates else None, trails)
    logger.debug(
        f"Hike {group.number}: {len(ordered)} routed, {len(unrouted)} unrouted, "
        f"{route.total_distance_m:.0f} m via {route.strategy.value}, trail={trail.name if trail else None}"
    )
    return ComputedHike(
        number=group.number,
        animals=ordered + unrouted,
        route=coordinates,
        total_distance_m=route.total_distance_m,
        stops=tuple(route.stops),
        unrouted=unrouted,
        suggested_trail=trail,
        strategy=route.strategy,
    )


def compute_daily_schedule(
    on: date,
    animals: Sequence[Animal],
    exceptions: ExceptionLookup,
    trails: Sequence[TrailCandidate],
    *,
    start: Coordinate | None = None,
    config: Settings | None = None,
) -> ComputedDailySchedule:
    """Build the hikes for ``on``.

    Args:
        on: Target date. Saturdays and Sundays always produce an empty schedule.
        animals: Active animal snapshots sorted by name.
        exceptions: Lookup of weekly exceptions by (animal id, week start).
        trails: Active trail candidates sorted by name.
        start: Optional starting coordinate for every route. Routes start at
            their first pickup when omitted.
        config: Settings override; the module settings are used otherwise.

    Returns:
        A ``ComputedDailySchedule`` with zero, one or two hikes. Animals that
        did not fit the daily capacity are listed in ``dropped``.
    """

    config = config or default_settings
    if isinstance(on, datetime):
        on = on.date()
    if weekday_for(on) is None:
        return ComputedDailySchedule(date=on, hikes=())

    eligible = scheduled_animals(_active(animals), on, exceptions)
    grouping = group_into_hikes(
        eligible,
        max_per_hike=config.max_animals_per_hike,
        max_hikes=config.max_hikes_per_day,
    )
    candidates = filter_trails(trails, config.preferred_trail_regions)

    hikes = tuple(_build_hike(group, candidates, start=start, config=config) for group in grouping.groups)
    logger.info(
        f"Schedule for {on.isoformat()}: {len(eligible)} eligible, {len(hikes)} hikes, "
        f"{len(grouping.dropped)} dropped"
    )
    return ComputedDailySchedule(date=on, hikes=hikes, dropped=tuple(grouping.dropped))


def compute_week_schedule(
    week_of: date,
    animals: Sequence[Animal],
    exceptions: ExceptionLookup,
) -> dict[WeekDay, list[Animal]]:
    """Resolve the animals picked up on each working day of the week containing ``week_of``."""

    week_start = start_of_week(week_of)
    active = _active(animals)
    return {day: scheduled_animals(active, date_for(day, week_start), exceptions) for day in WeekDay}
