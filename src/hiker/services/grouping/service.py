"""Split the day's scheduled animals into capacity-bounded hikes."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from ...config import settings
from ...models.domain import Animal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HikeGroup:
    number: int
    animals: List[Animal]


@dataclass(slots=True)
class GroupingResult:
    groups: List[HikeGroup]
    dropped: List[Animal]
    max_per_hike: int
    max_hikes: int

    @property
    def overflowed(self) -> bool:
        return bool(self.dropped)


def _split_evenly(animals: Sequence[Animal], group_count: int) -> list[list[Animal]]:
    total = len(animals)
    bounds = [index * total // group_count for index in range(group_count + 1)]
    return [list(animals[bounds[i]:bounds[i + 1]]) for i in range(group_count)]


def group_into_hikes(
    animals: Sequence[Animal],
    *,
    max_per_hike: int | None = None,
    max_hikes: int | None = None,
) -> GroupingResult:
    """Group animals by input order; callers pass them sorted by name.

    With the default limits (8 per hike, 2 hikes) up to eight animals share a
    single hike and nine to sixteen are split at ``count // 2``. Animals
    beyond the total capacity are returned in ``dropped``.
    """

    max_per_hike = max_per_hike if max_per_hike is not None else settings.max_animals_per_hike
    max_hikes = max_hikes if max_hikes is not None else settings.max_hikes_per_day
    if max_per_hike < 1:
        raise ValueError("max_per_hike must be >= 1")
    if max_hikes < 1:
        raise ValueError("max_hikes must be >= 1")

    capacity = max_per_hike * max_hikes
    kept = list(animals[:capacity])
    dropped = list(animals[capacity:])
    if dropped:
        logger.warning(
            f"{len(animals)} animals scheduled but capacity is {capacity} "
            f"({max_hikes} hikes x {max_per_hike}); dropping {', '.join(a.name for a in dropped)}"
        )

    if not kept:
        return GroupingResult(groups=[], dropped=dropped, max_per_hike=max_per_hike, max_hikes=max_hikes)

    group_count = min(max_hikes, math.ceil(len(kept) / max_per_hike))
    groups = [
        HikeGroup(number=index, animals=members)
        for index, members in enumerate(_split_evenly(kept, group_count), start=1)
    ]
    return GroupingResult(groups=groups, dropped=dropped, max_per_hike=max_per_hike, max_hikes=max_hikes)
