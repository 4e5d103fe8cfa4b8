"""Convert raw records from the storage layer into read-only domain snapshots."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from ..models.domain import Animal, Coordinate, DayStatus, TrailCandidate, WeekDay, WeeklyException
from ..services.calendar import start_of_week

logger = logging.getLogger(__name__)


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = float(value)
    else:
        try:
            parsed = float(str(value).replace(",", ""))
        except ValueError as exc:
            raise ValueError(f"Unable to parse float from value '{value}'") from exc
    if not math.isfinite(parsed):
        raise ValueError(f"Coordinate value must be finite, got '{value}'")
    return parsed


def _coerce_bool(value: Any, default: bool = True) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "y", "active"}


def _coerce_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        raise ValueError(f"Unable to parse date from value '{value}'") from exc


def _coerce_weekday(value: Any) -> Optional[WeekDay]:
    if isinstance(value, WeekDay):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    try:
        return WeekDay(int(value))
    except (TypeError, ValueError):
        return None


def _coordinate(record: Mapping[str, Any], lat_key: str, lon_key: str) -> Optional[Coordinate]:
    lat = _coerce_float(record.get(lat_key))
    lon = _coerce_float(record.get(lon_key))
    if lat is None or lon is None:
        return None
    return Coordinate(latitude=lat, longitude=lon)


def _text(record: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return ""


def parse_animal(record: Mapping[str, Any]) -> Animal:
    animal_id = _text(record, "animal_id", "id")
    if not animal_id:
        raise ValueError(f"Animal record is missing an id: {dict(record)}")

    days: set[WeekDay] = set()
    for raw_day in record.get("regular_days") or ():
        day = _coerce_weekday(raw_day)
        if day is None:
            logger.debug(f"Ignoring unknown schedule day {raw_day!r} for animal {animal_id}")
            continue
        days.add(day)

    return Animal(
        animal_id=animal_id,
        name=_text(record, "name"),
        regular_days=frozenset(days),
        location=_coordinate(record, "latitude", "longitude"),
        is_active=_coerce_bool(record.get("is_active")),
    )


def parse_exception(record: Mapping[str, Any]) -> WeeklyException:
    animal_id = _text(record, "animal_id", "dog_id")
    if not animal_id:
        raise ValueError(f"Exception record is missing an animal id: {dict(record)}")
    week_start = start_of_week(_coerce_date(record.get("week_start")))

    overrides: dict[WeekDay, DayStatus] = {}
    for raw_day, raw_status in (record.get("day_overrides") or {}).items():
        day = _coerce_weekday(raw_day)
        try:
            status = DayStatus(str(raw_status).strip().lower())
        except ValueError:
            status = None
        if day is None or status is None:
            logger.debug(f"Ignoring override {raw_day!r}: {raw_status!r} for animal {animal_id}")
            continue
        overrides[day] = status

    return WeeklyException(animal_id=animal_id, week_start=week_start, day_overrides=overrides)


def parse_trail(record: Mapping[str, Any]) -> TrailCandidate:
    trail_id = _text(record, "trail_id", "id")
    location = _coordinate(record, "latitude", "longitude")
    if not trail_id or location is None:
        raise ValueError(f"Trail record requires an id and coordinates: {dict(record)}")
    return TrailCandidate(
        trail_id=trail_id,
        name=_text(record, "name"),
        location=location,
        region=_text(record, "region"),
        is_active=_coerce_bool(record.get("is_active")),
        notes=_text(record, "notes") or None,
    )


def load_animals(records: Iterable[Mapping[str, Any]]) -> tuple[Animal, ...]:
    """Parse animal records, sorted by name as the scheduler expects."""

    animals = [parse_animal(record) for record in records]
    return tuple(sorted(animals, key=lambda animal: animal.name.lower()))


def load_exceptions(records: Iterable[Mapping[str, Any]]) -> tuple[WeeklyException, ...]:
    return tuple(parse_exception(record) for record in records)


def load_trails(records: Iterable[Mapping[str, Any]]) -> tuple[TrailCandidate, ...]:
    trails = [parse_trail(record) for record in records]
    return tuple(sorted(trails, key=lambda trail: trail.name.lower()))
