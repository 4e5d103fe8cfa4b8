"""Suggest a hiking trail close to where a hike's pickups end."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ...models.domain import Coordinate, TrailCandidate
from ..geospatial import haversine_m

logger = logging.getLogger(__name__)


def filter_trails(candidates: Iterable[TrailCandidate], regions: Sequence[str] = ()) -> list[TrailCandidate]:
    """Keep active trails, narrowed to ``regions`` when at least one of them matches."""

    active = [trail for trail in candidates if trail.is_active]
    if not regions:
        return active
    wanted = {region.strip().lower() for region in regions}
    preferred = [trail for trail in active if trail.region.strip().lower() in wanted]
    if not preferred:
        logger.debug(f"No active trails in regions {sorted(wanted)}, using all {len(active)} active trails")
        return active
    return preferred


def suggest_trail(
    last_pickup: Optional[Coordinate], candidates: Sequence[TrailCandidate]
) -> Optional[TrailCandidate]:
    if not candidates:
        return None
    if last_pickup is None:
        return candidates[0]

    # min() returns the first of equally distant trails.
    return min(candidates, key=lambda trail: haversine_m(last_pickup, trail.location))
