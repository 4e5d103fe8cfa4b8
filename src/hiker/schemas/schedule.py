"""Daily schedule response schemas."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CoordinateModel(BaseModel):
    latitude: float
    longitude: float


class TrailModel(BaseModel):
    trail_id: str
    name: str
    region: str
    location: CoordinateModel
    notes: Optional[str] = None


class RouteStopModel(BaseModel):
    animal_id: str
    sequence: int
    distance_from_prev_m: float


class AnimalSummaryModel(BaseModel):
    animal_id: str
    name: str


class HikeModel(BaseModel):
    number: int = Field(..., ge=1)
    animal_count: int
    animals: List[AnimalSummaryModel]
    animal_names: str
    unrouted_animal_ids: List[str] = Field(default_factory=list)
    route: List[CoordinateModel]
    stops: List[RouteStopModel]
    total_distance_m: float
    total_distance_km: float
    total_distance_label: str
    strategy: Optional[str] = None
    suggested_trail: Optional[TrailModel] = None


class DailyScheduleModel(BaseModel):
    schedule_date: date
    weekday: Optional[str] = Field(default=None, description="Working day name; empty on weekends.")
    total_animals: int
    hikes: List[HikeModel]
    dropped_animal_ids: List[str] = Field(default_factory=list)


class WeekScheduleModel(BaseModel):
    week_start: date
    days: Dict[str, List[AnimalSummaryModel]]
