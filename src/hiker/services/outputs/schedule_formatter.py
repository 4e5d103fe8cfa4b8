"""Serializers for computed schedules."""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import Mapping, Sequence

from ...models.domain import Animal, Coordinate, TrailCandidate, WeekDay
from ...schemas.schedule import (
    AnimalSummaryModel,
    CoordinateModel,
    DailyScheduleModel,
    HikeModel,
    RouteStopModel,
    TrailModel,
    WeekScheduleModel,
)
from ..calendar import start_of_week, weekday_for
from ..scheduling.models import ComputedDailySchedule, ComputedHike


def format_distance_km(distance_m: float) -> str:
    return f"{distance_m / 1000:.1f} km"


def _coordinate_model(coordinate: Coordinate) -> CoordinateModel:
    return CoordinateModel(latitude=coordinate.latitude, longitude=coordinate.longitude)


def _animal_models(animals: Sequence[Animal]) -> list[AnimalSummaryModel]:
    return [AnimalSummaryModel(animal_id=animal.animal_id, name=animal.name) for animal in animals]


def _trail_model(trail: TrailCandidate | None) -> TrailModel | None:
    if trail is None:
        return None
    return TrailModel(
        trail_id=trail.trail_id,
        name=trail.name,
        region=trail.region,
        location=_coordinate_model(trail.location),
        notes=trail.notes,
    )


def _hike_model(hike: ComputedHike) -> HikeModel:
    return HikeModel(
        number=hike.number,
        animal_count=hike.animal_count,
        animals=_animal_models(hike.animals),
        animal_names=hike.animal_names_text,
        unrouted_animal_ids=[animal.animal_id for animal in hike.unrouted],
        route=[_coordinate_model(coordinate) for coordinate in hike.route],
        stops=[
            RouteStopModel(
                animal_id=stop.pickup_id,
                sequence=stop.sequence,
                distance_from_prev_m=stop.distance_from_prev_m,
            )
            for stop in hike.stops
        ],
        total_distance_m=hike.total_distance_m,
        total_distance_km=round(hike.total_distance_km, 3),
        total_distance_label=format_distance_km(hike.total_distance_m),
        strategy=hike.strategy.value if hike.strategy else None,
        suggested_trail=_trail_model(hike.suggested_trail),
    )


def daily_schedule_to_response(schedule: ComputedDailySchedule) -> DailyScheduleModel:
    day = weekday_for(schedule.date)
    return DailyScheduleModel(
        schedule_date=schedule.date,
        weekday=day.display_name if day else None,
        total_animals=schedule.total_animals,
        hikes=[_hike_model(hike) for hike in schedule.hikes],
        dropped_animal_ids=[animal.animal_id for animal in schedule.dropped],
    )


def daily_schedule_to_json(schedule: ComputedDailySchedule) -> dict:
    return daily_schedule_to_response(schedule).model_dump(mode="json")


def daily_schedule_to_csv(schedule: ComputedDailySchedule) -> str:
    """One row per animal; unrouted animals have an empty sequence."""

    buffer = io.StringIO()
    fieldnames = [
        "date",
        "hike",
        "sequence",
        "animal_id",
        "animal_name",
        "latitude",
        "longitude",
        "distance_from_prev_m",
        "hike_distance_m",
        "suggested_trail",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for hike in schedule.hikes:
        stops = {stop.pickup_id: stop for stop in hike.stops}
        for animal in hike.animals:
            stop = stops.get(animal.animal_id)
            writer.writerow(
                {
                    "date": schedule.date.isoformat(),
                    "hike": hike.number,
                    "sequence": stop.sequence if stop else "",
                    "animal_id": animal.animal_id,
                    "animal_name": animal.name,
                    "latitude": animal.location.latitude if animal.location else "",
                    "longitude": animal.location.longitude if animal.location else "",
                    "distance_from_prev_m": round(stop.distance_from_prev_m, 1) if stop else "",
                    "hike_distance_m": round(hike.total_distance_m, 1),
                    "suggested_trail": hike.suggested_trail.name if hike.suggested_trail else "",
                }
            )
    return buffer.getvalue()


def week_schedule_to_response(week_of: date, days: Mapping[WeekDay, Sequence[Animal]]) -> WeekScheduleModel:
    return WeekScheduleModel(
        week_start=start_of_week(week_of).monday,
        days={day.short_name: _animal_models(days.get(day, ())) for day in WeekDay},
    )
