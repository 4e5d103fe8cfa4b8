"""Resolve whether an animal is picked up on a given date.

A weekly exception record overrides individual days of the animal's regular
pattern. Days without an override, weeks without a record and weekend dates
all resolve without raising.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Optional, Protocol, Sequence

from ...models.domain import Animal, DayStatus, WeeklyException, WeekStart
from ..calendar import start_of_week, weekday_for

logger = logging.getLogger(__name__)


class ExceptionLookup(Protocol):
    def find(self, animal_id: str, week_start: WeekStart) -> Optional[WeeklyException]:
        ...


class ExceptionIndex:
    """In-memory lookup of weekly exceptions keyed by (animal id, week start)."""

    def __init__(self, exceptions: Iterable[WeeklyException] = ()) -> None:
        self._records: dict[tuple[str, WeekStart], WeeklyException] = {}
        for exception in exceptions:
            key = (exception.animal_id, exception.week_start)
            if key in self._records:
                logger.warning(
                    f"Duplicate exception for animal {exception.animal_id} in week of {exception.week_start}, "
                    f"keeping the first record"
                )
                continue
            self._records[key] = exception

    @classmethod
    def from_callable(
        cls, lookup: Callable[[str, WeekStart], Optional[WeeklyException]]
    ) -> "_CallableLookup":
        return _CallableLookup(lookup)

    def find(self, animal_id: str, week_start: WeekStart) -> Optional[WeeklyException]:
        return self._records.get((animal_id, week_start))

    def __len__(self) -> int:
        return len(self._records)


class _CallableLookup:
    def __init__(self, lookup: Callable[[str, WeekStart], Optional[WeeklyException]]) -> None:
        self._lookup = lookup

    def find(self, animal_id: str, week_start: WeekStart) -> Optional[WeeklyException]:
        return self._lookup(animal_id, week_start)


def _status_allows_pickup(status: DayStatus) -> bool:
    match status:
        case DayStatus.SCHEDULED:
            return True
        case DayStatus.AWAY | DayStatus.INJURED | DayStatus.CANCELLED:
            return False
        case DayStatus.RESCHEDULED:
            # The record does not say which day the visit moved to.
            return False
        case _:
            raise ValueError(f"Unknown schedule status '{status}'.")


def status_for(animal: Animal, on: date, exceptions: ExceptionLookup) -> Optional[DayStatus]:
    """Return the override recorded for ``animal`` on ``on``, if any."""

    day = weekday_for(on)
    if day is None:
        return None
    exception = exceptions.find(animal.animal_id, start_of_week(on))
    if exception is None:
        return None
    return exception.status_for(day)


def is_scheduled(animal: Animal, on: date, exceptions: ExceptionLookup) -> bool:
    day = weekday_for(on)
    if day is None:
        return False

    status = status_for(animal, on, exceptions)
    if status is None:
        return animal.is_scheduled_on(day)
    return _status_allows_pickup(status)


def scheduled_animals(animals: Sequence[Animal], on: date, exceptions: ExceptionLookup) -> list[Animal]:
    """Animals picked up on ``on``, in the order they were supplied."""

    return [animal for animal in animals if is_scheduled(animal, on, exceptions)]
