from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.vaccine import Vaccine


@dataclass(slots=True)
class CreateVaccineInput:
    animal_id: UUID
    vaccine_type: str
    date: date
    next_date: date | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, user_id: UUID, payload: CreateVaccineInput) -> Vaccine:
    animal = await uow.animals.get(user_id, payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    vaccine = Vaccine.create(
        user_id=user_id,
        animal_id=payload.animal_id,
        vaccine_type=payload.vaccine_type.strip(),
        date=payload.date,
        next_date=payload.next_date,
        notes=payload.notes or None,
    )
    created = await uow.vaccines.add(vaccine)
    await uow.commit()
    return created
