from datetime import date

import pytest

from src.hiker.models.domain import Animal, Coordinate, DayStatus, WeekDay, WeeklyException
from src.hiker.services.calendar import start_of_week
from src.hiker.services.scheduling.resolver import (
    ExceptionIndex,
    is_scheduled,
    scheduled_animals,
    status_for,
)

MONDAY = date(2025, 11, 10)
TUESDAY = date(2025, 11, 11)
SATURDAY = date(2025, 11, 15)


def _animal(aid: str, name: str, *days: WeekDay) -> Animal:
    return Animal(
        animal_id=aid,
        name=name,
        regular_days=frozenset(days),
        location=Coordinate(44.70, -63.65),
    )


def _exception(aid: str, on: date, overrides: dict) -> WeeklyException:
    return WeeklyException(animal_id=aid, week_start=start_of_week(on), day_overrides=overrides)


def test_regular_pattern_used_without_exception():
    max_dog = _animal("max", "Max", WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY)
    empty = ExceptionIndex()

    assert is_scheduled(max_dog, MONDAY, empty)
    assert not is_scheduled(max_dog, TUESDAY, empty)


def test_weekend_is_never_scheduled():
    every_day = _animal("busy", "Busy", *WeekDay)
    assert not is_scheduled(every_day, SATURDAY, ExceptionIndex())


@pytest.mark.parametrize(
    "status, expected",
    [
        (DayStatus.SCHEDULED, True),
        (DayStatus.AWAY, False),
        (DayStatus.INJURED, False),
        (DayStatus.CANCELLED, False),
        (DayStatus.RESCHEDULED, False),
    ],
)
def test_override_beats_regular_pattern(status, expected):
    on_monday = _animal("a1", "Luna", WeekDay.MONDAY)
    off_monday = _animal("a2", "Charlie", WeekDay.TUESDAY)
    exceptions = ExceptionIndex(
        [
            _exception("a1", MONDAY, {WeekDay.MONDAY: status}),
            _exception("a2", MONDAY, {WeekDay.MONDAY: status}),
        ]
    )

    assert is_scheduled(on_monday, MONDAY, exceptions) is expected
    assert is_scheduled(off_monday, MONDAY, exceptions) is expected


def test_exception_without_entry_for_day_falls_back_to_pattern():
    luna = _animal("luna", "Luna", WeekDay.MONDAY, WeekDay.TUESDAY)
    exceptions = ExceptionIndex([_exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.AWAY})])

    assert not is_scheduled(luna, MONDAY, exceptions)
    assert is_scheduled(luna, TUESDAY, exceptions)
    assert status_for(luna, TUESDAY, exceptions) is None


def test_exception_only_applies_to_its_own_week():
    luna = _animal("luna", "Luna", WeekDay.MONDAY)
    exceptions = ExceptionIndex([_exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.AWAY})])

    assert is_scheduled(luna, date(2025, 11, 17), exceptions)


def test_duplicate_exception_keeps_first_record(caplog):
    first = _exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.AWAY})
    second = _exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.SCHEDULED})

    with caplog.at_level("WARNING"):
        index = ExceptionIndex([first, second])

    assert len(index) == 1
    assert index.find("luna", start_of_week(MONDAY)) is first
    assert "Duplicate exception" in caplog.text


def test_callable_lookup_is_accepted():
    luna = _animal("luna", "Luna", WeekDay.MONDAY)
    record = _exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.INJURED})
    calls = []

    def lookup(animal_id, week_start):
        calls.append((animal_id, week_start))
        return record if animal_id == "luna" else None

    assert not is_scheduled(luna, MONDAY, ExceptionIndex.from_callable(lookup))
    assert calls == [("luna", start_of_week(MONDAY))]


def test_scheduled_animals_preserves_input_order():
    animals = [
        _animal("charlie", "Charlie", WeekDay.TUESDAY, WeekDay.THURSDAY),
        _animal("luna", "Luna", WeekDay.MONDAY, WeekDay.WEDNESDAY),
        _animal("max", "Max", WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY),
    ]

    result = scheduled_animals(animals, MONDAY, ExceptionIndex())

    assert [animal.name for animal in result] == ["Luna", "Max"]


def test_any_object_with_find_is_a_lookup():
    record = _exception("luna", MONDAY, {WeekDay.MONDAY: DayStatus.CANCELLED})

    class _Store:
        def find(self, animal_id, week_start):
            return record if (animal_id, week_start) == ("luna", start_of_week(MONDAY)) else None

    assert not is_scheduled(_animal("luna", "Luna", WeekDay.MONDAY), MONDAY, _Store())
    assert is_scheduled(_animal("max", "Max", WeekDay.MONDAY), MONDAY, _Store())
