from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from senda.domain.value_objects.animal_profile import Category, Purpose
from senda.domain.value_objects.animal_status import AnimalStatus
from senda.domain.value_objects.ear_tag import EarTagColor
from senda.domain.value_objects.gender import Gender


class AnimalCreate(BaseModel):
    tag: str = Field(min_length=3)
    name: str = Field(min_length=2)
    gender: Gender
    birth_date: DtDate
    entry_date: DtDate
    breed: str = Field(min_length=2)
    status: AnimalStatus = AnimalStatus.HEALTHY
    ear_tag: EarTagColor
    weight: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    owner: str = Field(min_length=2)
    purpose: Purpose
    farm: str = Field(min_length=2)
    category: Category
    paddock: str | None = None

    @field_validator("tag", "name", "breed", "owner", "farm", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        # Length limits apply to the stripped text
        return value.strip() if isinstance(value, str) else value


class AnimalUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    gender: Gender | None = None
    birth_date: DtDate | None = None
    entry_date: DtDate | None = None
    breed: str | None = Field(default=None, min_length=2)
    ear_tag: EarTagColor | None = None
    farm: str | None = Field(default=None, min_length=2)
    owner: str | None = Field(default=None, min_length=2)
    paddock: str | None = None
    purpose: Purpose | None = None
    weight: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    category: Category | None = None


class HealthUpdate(BaseModel):
    status: AnimalStatus
    deworming_date: DtDate | None = None
    professional: str | None = None
    medications: str | None = None
    last_vet_check: DtDate | None = None
    checkup_notes: str | None = None
    notes: str | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    name: str
    gender: str
    breed: str
    # Stored verbatim; values outside AnimalStatus are kept as-is
    status: str
    birth_date: DtDate | None = None
    entry_date: DtDate | None = None
    ear_tag: str | None = None
    owner: str | None = None
    farm: str | None = None
    paddock: str | None = None
    purpose: str | None = None
    weight: Decimal | None = None
    category: str | None = None
    created_at: datetime
    # Display attributes
    status_label: str | None = None
    status_color: str | None = None
    ear_tag_label: str | None = None
    ear_tag_color: str | None = None
    gender_label: str | None = None


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    # Number of records before search/filter was applied
    total: int
    empty_message: str | None = None


class CarnetVaccine(BaseModel):
    id: UUID
    vaccine_type: str
    date: DtDate
    next_date: DtDate | None = None
    notes: str | None = None
    date_label: str
    next_date_label: str | None = None


class CarnetResponse(BaseModel):
    animal: AnimalResponse
    age_label: str
    birth_date_label: str
    entry_date_label: str
    vaccines: list[CarnetVaccine]
    empty_message: str | None = None
