"""Computed schedule models. Built fresh for every request and never stored."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...models.domain import Animal, Coordinate, TrailCandidate
from ..routing.models import RouteStop, RouteStrategy


@dataclass(slots=True, frozen=True)
class ComputedHike:
    number: int
    animals: tuple[Animal, ...]
    route: tuple[Coordinate, ...]
    total_distance_m: float
    stops: tuple[RouteStop, ...] = ()
    unrouted: tuple[Animal, ...] = ()
    suggested_trail: Optional[TrailCandidate] = None
    strategy: Optional[RouteStrategy] = None

    @property
    def animal_count(self) -> int:
        return len(self.animals)

    @property
    def is_empty(self) -> bool:
        return not self.animals

    @property
    def animal_names_text(self) -> str:
        return ", ".join(animal.name for animal in self.animals)

    @property
    def total_distance_km(self) -> float:
        return self.total_distance_m / 1000.0


@dataclass(slots=True, frozen=True)
class ComputedDailySchedule:
    date: date
    hikes: tuple[ComputedHike, ...] = ()
    dropped: tuple[Animal, ...] = ()

    def __post_init__(self) -> None:
        numbers = [hike.number for hike in self.hikes]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Hike numbers must be unique, got {numbers}")

    def hike(self, number: int) -> Optional[ComputedHike]:
        return next((hike for hike in self.hikes if hike.number == number), None)

    @property
    def hike1(self) -> Optional[ComputedHike]:
        return self.hike(1)

    @property
    def hike2(self) -> Optional[ComputedHike]:
        return self.hike(2)

    @property
    def total_animals(self) -> int:
        return sum(hike.animal_count for hike in self.hikes)

    @property
    def is_empty(self) -> bool:
        return self.total_animals == 0
