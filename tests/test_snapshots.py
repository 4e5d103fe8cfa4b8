from datetime import date

import pytest

from src.hiker.models.domain import Coordinate, DayStatus, WeekDay, WeekStart
from src.hiker.data.snapshots import (
    load_animals,
    load_exceptions,
    load_trails,
    parse_animal,
    parse_exception,
    parse_trail,
)


def test_parse_animal_skips_unknown_days():
    animal = parse_animal(
        {"id": "D1", "name": "Max", "regular_days": [1, 3, 5, 6, "x"], "latitude": "44.73", "longitude": "-63.66"}
    )

    assert animal.animal_id == "D1"
    assert animal.regular_days == frozenset({WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY})
    assert animal.location == Coordinate(44.73, -63.66)
    assert animal.is_active


def test_parse_animal_without_coordinates():
    animal = parse_animal({"animal_id": "D2", "name": "Luna", "latitude": "", "is_active": "false"})

    assert animal.location is None
    assert not animal.is_active


def test_parse_animal_rejects_bad_values():
    with pytest.raises(ValueError):
        parse_animal({"name": "No Id"})
    with pytest.raises(ValueError):
        parse_animal({"id": "D3", "name": "Rex", "latitude": "north", "longitude": "1"})


def test_parse_exception_normalises_week_and_skips_bad_overrides():
    exception = parse_exception(
        {
            "animal_id": "D1",
            "week_start": "2025-11-12",
            "day_overrides": {"1": "Away", 3: "scheduled", 7: "away", 2: "unknown"},
        }
    )

    assert exception.week_start == WeekStart(date(2025, 11, 10))
    assert dict(exception.day_overrides) == {WeekDay.MONDAY: DayStatus.AWAY, WeekDay.WEDNESDAY: DayStatus.SCHEDULED}
    assert exception.status_for(WeekDay.TUESDAY) is None


def test_parse_trail_requires_coordinates():
    trail = parse_trail({"id": "T1", "name": "Admiral Lake", "latitude": 44.77, "longitude": -63.70, "region": "Bedford"})

    assert trail.region == "Bedford"
    assert trail.notes is None
    with pytest.raises(ValueError):
        parse_trail({"id": "T2", "name": "Nowhere"})


def test_loaders_sort_by_name():
    animals = load_animals([{"id": "2", "name": "max"}, {"id": "1", "name": "Luna"}, {"id": "3", "name": "Charlie"}])
    trails = load_trails(
        [
            {"id": "T2", "name": "Sandy Lake", "latitude": 44.74, "longitude": -63.72},
            {"id": "T1", "name": "Admiral Lake", "latitude": 44.77, "longitude": -63.70},
        ]
    )
    exceptions = load_exceptions([{"animal_id": "1", "week_start": date(2025, 11, 10)}])

    assert [animal.name for animal in animals] == ["Charlie", "Luna", "max"]
    assert [trail.trail_id for trail in trails] == ["T1", "T2"]
    assert exceptions[0].day_overrides == {}


def test_parse_animal_rejects_fractional_and_boolean_days():
    animal = parse_animal({"id": "D4", "name": "Rex", "regular_days": [3.9, True, 2.0, "4"]})

    assert animal.regular_days == frozenset({WeekDay.TUESDAY, WeekDay.THURSDAY})


def test_non_finite_coordinates_are_rejected():
    with pytest.raises(ValueError):
        parse_animal({"id": "D5", "name": "Nan", "latitude": "nan", "longitude": "-63.66"})
    with pytest.raises(ValueError):
        parse_trail({"id": "T3", "name": "Far", "latitude": float("inf"), "longitude": -63.70})
