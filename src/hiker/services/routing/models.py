"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ...models.domain import Coordinate


class RouteStrategy(str, Enum):
    EXACT = "exact"
    NEAREST_NEIGHBOR = "nearest_neighbor"


@dataclass(slots=True, frozen=True)
class Pickup:
    pickup_id: str
    coordinate: Coordinate


@dataclass(slots=True, frozen=True)
class RouteStop:
    pickup_id: str
    sequence: int
    distance_from_prev_m: float


@dataclass(slots=True, frozen=True)
class OptimizedRoute:
    pickups: List[Pickup]
    stops: List[RouteStop]
    total_distance_m: float
    strategy: RouteStrategy

    @property
    def coordinates(self) -> List[Coordinate]:
        return [pickup.coordinate for pickup in self.pickups]
