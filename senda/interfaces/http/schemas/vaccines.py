from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VaccineCreate(BaseModel):
    animal_id: UUID
    vaccine_type: str = Field(min_length=2)
    date: DtDate
    next_date: DtDate | None = None
    notes: str | None = None


class VaccineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: UUID
    vaccine_type: str
    date: DtDate
    next_date: DtDate | None = None
    notes: str | None = None
    created_at: datetime
    animal_name: str | None = None
    animal_tag: str | None = None
