from __future__ import annotations

from datetime import date as DtDate
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class KPISnapshotSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_animals: int
    healthy_animals: int
    sick_animals: int
    critical_animals: int
    pregnant_cows: int
    average_age: float
    average_weight: float
    up_to_date_vaccinations: int
    pending_vaccinations: int


class ChartBucket(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    label: str
    count: int
    percentage: float
    color: str


class GenderAgeRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    gender: str
    label: str
    buckets: dict[str, int]


class UpcomingEventSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: Literal["vaccination", "birth", "checkup"]
    animal_id: UUID | None = None
    animal_name: str
    animal_tag: str
    date: DtDate
    description: str
    color: str | None = None
    date_label: str | None = None


class GeneralDashboardResponse(BaseModel):
    kpis: KPISnapshotSchema
    status_chart: list[ChartBucket]
    ownership_chart: list[ChartBucket]
    gender_age_chart: list[GenderAgeRowSchema]
    upcoming_events: list[UpcomingEventSchema]
    owners: list[str]
    owner: str | None = None


class HerdMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    males: int
    females: int
    pregnant: int
    not_pregnant: int
    average_age: float
