"""Calendar helpers built on a Monday-first, locale independent week."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..models.domain import WeekDay, WeekStart


def _as_date(value: date) -> date:
    # datetime is a subclass of date; drop the time component.
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_for(value: date) -> Optional[WeekDay]:
    """Return the ``WeekDay`` of a date, or ``None`` on Saturday and Sunday."""

    iso_day = _as_date(value).isoweekday()
    if iso_day > WeekDay.FRIDAY:
        return None
    return WeekDay(iso_day)


def is_weekday(value: date) -> bool:
    return weekday_for(value) is not None


def start_of_week(value: date) -> WeekStart:
    """Return the Monday that starts the week containing ``value``.

    Saturday and Sunday belong to the week that began on the preceding Monday.
    """

    day = _as_date(value)
    return WeekStart(day - timedelta(days=day.weekday()))


def date_for(day: WeekDay, week_start: WeekStart) -> date:
    """Return the concrete date of ``day`` inside the week opened by ``week_start``."""

    return week_start.monday + timedelta(days=int(day) - 1)


def weekdays_in_week(week_start: WeekStart) -> list[date]:
    return [date_for(day, week_start) for day in WeekDay]


def add_days(value: date, days: int) -> date:
    return _as_date(value) + timedelta(days=days)


def add_weeks(value: date, weeks: int) -> date:
    return _as_date(value) + timedelta(weeks=weeks)


def is_same_week(first: date, second: date) -> bool:
    return start_of_week(first) == start_of_week(second)


def days_between(start: date, end: date) -> int:
    return (_as_date(end) - _as_date(start)).days
