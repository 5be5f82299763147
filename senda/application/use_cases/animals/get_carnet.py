from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal
from senda.domain.models.vaccine import Vaccine
from senda.domain.services.kpis import age_label


@dataclass(slots=True)
class CarnetResult:
    animal: Animal
    age_label: str
    vaccines: list[Vaccine]


async def execute(uow: UnitOfWork, user_id: UUID, animal_id: UUID, today: date) -> CarnetResult:
    animal = await uow.animals.get(user_id, animal_id)
    if not animal:
        raise NotFound("Animal not found")
    vaccines = await uow.vaccines.list(
        user_id, animal_id=animal_id, order_by="date", descending=True
    )
    return CarnetResult(
        animal=animal,
        age_label=age_label(animal.birth_date, today),
        vaccines=vaccines,
    )
