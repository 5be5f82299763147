from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from senda.domain.models.reproduction import ServiceMethod


class ReproductionCreate(BaseModel):
    mother_id: UUID
    father_id: UUID
    service_method: ServiceMethod
    service_date: DtDate
    notes: str | None = None


class ReproductionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    mother_id: UUID
    father_id: UUID
    service_method: str
    service_date: DtDate
    expected_birth_date: DtDate
    actual_birth_date: DtDate | None = None
    status: str
    notes: str | None = None
    created_at: datetime
