"""Daily schedule services."""

from .resolver import ExceptionIndex, ExceptionLookup, is_scheduled, scheduled_animals, status_for
from .service import compute_daily_schedule, compute_week_schedule

__all__ = [
    "ExceptionIndex",
    "ExceptionLookup",
    "is_scheduled",
    "scheduled_animals",
    "status_for",
    "compute_daily_schedule",
    "compute_week_schedule",
]
