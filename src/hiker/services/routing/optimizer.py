"""Pickup order optimization over great-circle distances.

Small groups are solved exactly by enumerating every visiting order with
Heap's algorithm. Groups above the exact-search limit use a greedy nearest
neighbour walk. Distances never come from a road network.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from ...config import MAX_EXACT_PICKUPS, settings
from ...models.domain import Coordinate
from ..geospatial import haversine_m, is_valid_coordinate
from .models import OptimizedRoute, Pickup, RouteStop, RouteStrategy

logger = logging.getLogger(__name__)


def route_distance(coordinates: Sequence[Coordinate], start: Coordinate | None = None) -> float:
    """Total metres travelled visiting ``coordinates`` in order, from ``start`` if given."""

    if not coordinates:
        return 0.0
    total = 0.0
    current = start or coordinates[0]
    for coordinate in coordinates:
        total += haversine_m(current, coordinate)
        current = coordinate
    return total


def _build_matrix(pickups: Sequence[Pickup], start: Coordinate | None) -> tuple[list[list[float]], list[float]]:
    """Pairwise pickup distances plus the leg from ``start`` to each pickup."""

    matrix = [[haversine_m(a.coordinate, b.coordinate) for b in pickups] for a in pickups]
    if start is None:
        from_start = [0.0] * len(pickups)
    else:
        from_start = [haversine_m(start, pickup.coordinate) for pickup in pickups]
    return matrix, from_start


def _order_length(order: Sequence[int], matrix: list[list[float]], from_start: list[float]) -> float:
    # Without a start location the first pickup contributes nothing.
    total = from_start[order[0]]
    for previous, current in zip(order, order[1:]):
        total += matrix[previous][current]
    return total


def _heap_permutations(size: int) -> Iterator[list[int]]:
    """Yield every ordering of ``range(size)`` using iterative Heap's algorithm."""

    order = list(range(size))
    counters = [0] * size
    yield list(order)
    index = 1
    while index < size:
        if counters[index] < index:
            if index % 2 == 0:
                order[0], order[index] = order[index], order[0]
            else:
                order[counters[index]], order[index] = order[index], order[counters[index]]
            yield list(order)
            counters[index] += 1
            index = 1
        else:
            counters[index] = 0
            index += 1


def _exact_order(matrix: list[list[float]], from_start: list[float]) -> tuple[list[int], float]:
    best_order: list[int] = list(range(len(matrix)))
    best_distance = float("inf")
    for order in _heap_permutations(len(matrix)):
        distance = _order_length(order, matrix, from_start)
        if distance < best_distance:
            best_distance = distance
            best_order = order
    return best_order, best_distance


def _nearest_neighbor_order(
    pickups: Sequence[Pickup], start: Coordinate | None
) -> tuple[list[int], float]:
    remaining = list(range(len(pickups)))
    order: list[int] = []
    total = 0.0
    current = start or pickups[0].coordinate
    while remaining:
        nearest_position = 0
        nearest_distance = float("inf")
        for position, candidate in enumerate(remaining):
            distance = haversine_m(current, pickups[candidate].coordinate)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_position = position
        chosen = remaining.pop(nearest_position)
        order.append(chosen)
        total += nearest_distance
        current = pickups[chosen].coordinate
    return order, total


def _build_route(
    pickups: Sequence[Pickup],
    order: Sequence[int],
    total: float,
    start: Coordinate | None,
    strategy: RouteStrategy,
) -> OptimizedRoute:
    ordered = [pickups[index] for index in order]
    stops: list[RouteStop] = []
    previous = start or ordered[0].coordinate
    for sequence, pickup in enumerate(ordered, start=1):
        stops.append(
            RouteStop(
                pickup_id=pickup.pickup_id,
                sequence=sequence,
                distance_from_prev_m=haversine_m(previous, pickup.coordinate),
            )
        )
        previous = pickup.coordinate
    return OptimizedRoute(pickups=ordered, stops=stops, total_distance_m=total, strategy=strategy)


def optimize_route(
    pickups: Sequence[Pickup],
    start: Coordinate | None = None,
    *,
    strategy: RouteStrategy | None = None,
    exact_limit: int | None = None,
) -> OptimizedRoute:
    """Order pickups to keep the total straight-line distance short.

    Pickups at (0, 0) are discarded first. Exact search is used while the
    number of valid pickups stays within ``exact_limit``; the limit can never
    exceed ``MAX_EXACT_PICKUPS``.
    """

    strategy = strategy or RouteStrategy(settings.route_strategy)
    limit = min(exact_limit if exact_limit is not None else settings.exact_route_max_pickups, MAX_EXACT_PICKUPS)

    valid = [pickup for pickup in pickups if is_valid_coordinate(pickup.coordinate)]
    if len(valid) < len(pickups):
        logger.debug(f"Ignoring {len(pickups) - len(valid)} pickups without a usable coordinate")

    if not valid:
        return OptimizedRoute(pickups=[], stops=[], total_distance_m=0.0, strategy=strategy)
    if len(valid) == 1:
        only = valid[0]
        return OptimizedRoute(
            pickups=[only],
            stops=[RouteStop(pickup_id=only.pickup_id, sequence=1, distance_from_prev_m=0.0)],
            total_distance_m=0.0,
            strategy=strategy,
        )

    if strategy is RouteStrategy.EXACT and len(valid) <= limit:
        matrix, from_start = _build_matrix(valid, start)
        order, total = _exact_order(matrix, from_start)
        return _build_route(valid, order, total, start, RouteStrategy.EXACT)

    if strategy is RouteStrategy.EXACT:
        logger.info(
            f"{len(valid)} pickups exceed the exact search limit of {limit}; using nearest neighbour"
        )
    order, total = _nearest_neighbor_order(valid, start)
    return _build_route(valid, order, total, start, RouteStrategy.NEAREST_NEIGHBOR)
