"""Domain models for animals, weekly exceptions and trail candidates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


class WeekDay(IntEnum):
    """Working days only; weekend dates have no ``WeekDay``."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.display_name[:3]


class DayStatus(str, Enum):
    """Override applied to a single day by a weekly exception."""

    SCHEDULED = "scheduled"
    AWAY = "away"
    INJURED = "injured"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True, frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @property
    def is_origin(self) -> bool:
        return self.latitude == 0 and self.longitude == 0


@dataclass(slots=True, frozen=True)
class WeekStart:
    """The Monday that opens a week. Build it with ``calendar.start_of_week``."""

    monday: date

    def __post_init__(self) -> None:
        if self.monday.weekday() != 0:
            raise ValueError(f"Week start must be a Monday, got {self.monday.isoformat()} ({self.monday:%A}).")

    def __str__(self) -> str:
        return self.monday.isoformat()


@dataclass(slots=True, frozen=True)
class Animal:
    """Represents a dog snapshot handed over by the storage layer."""

    animal_id: str
    name: str
    regular_days: frozenset[WeekDay] = frozenset()
    location: Optional[Coordinate] = None
    is_active: bool = True

    def is_scheduled_on(self, day: WeekDay) -> bool:
        return day in self.regular_days


@dataclass(slots=True, frozen=True)
class WeeklyException:
    """Per-week overrides for one animal. Days without an entry follow the regular pattern."""

    animal_id: str
    week_start: WeekStart
    day_overrides: Mapping[WeekDay, DayStatus] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "day_overrides", MappingProxyType(dict(self.day_overrides)))

    def status_for(self, day: WeekDay) -> Optional[DayStatus]:
        return self.day_overrides.get(day)


@dataclass(slots=True, frozen=True)
class TrailCandidate:
    """Represents a hiking location that can be suggested for a hike."""

    trail_id: str
    name: str
    location: Coordinate
    region: str
    is_active: bool = True
    notes: Optional[str] = None
