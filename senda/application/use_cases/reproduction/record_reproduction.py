from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from senda.application.errors import NotFound, ValidationError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.reproduction import Reproduction
from senda.domain.value_objects.gender import Gender


@dataclass(slots=True)
class RecordReproductionInput:
    mother_id: UUID
    father_id: UUID
    service_method: str
    service_date: date
    notes: str | None = None


async def execute(
    uow: UnitOfWork, user_id: UUID, payload: RecordReproductionInput
) -> Reproduction:
    mother = await uow.animals.get(user_id, payload.mother_id)
    if not mother:
        raise NotFound("Mother not found")
    if mother.gender != Gender.FEMALE.value:
        raise ValidationError("Mother must be a female animal", details={"mother_id": str(mother.id)})
    father = await uow.animals.get(user_id, payload.father_id)
    if not father:
        raise NotFound("Father not found")
    if father.gender != Gender.MALE.value:
        raise ValidationError("Father must be a male animal", details={"father_id": str(father.id)})

    # expected_birth_date is derived from service_date, never taken from input
    record = Reproduction.create(
        user_id=user_id,
        mother_id=mother.id,
        father_id=father.id,
        service_method=payload.service_method,
        service_date=payload.service_date,
        notes=payload.notes,
    )
    created = await uow.reproductions.add(record)
    await uow.commit()
    return created
