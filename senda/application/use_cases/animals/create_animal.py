from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal


@dataclass(slots=True)
class CreateAnimalInput:
    tag: str
    name: str
    gender: str
    breed: str
    status: str
    birth_date: date | None = None
    entry_date: date | None = None
    ear_tag: str | None = None
    owner: str | None = None
    farm: str | None = None
    paddock: str | None = None
    purpose: str | None = None
    weight: Decimal | None = None
    category: str | None = None


async def execute(uow: UnitOfWork, user_id: UUID, payload: CreateAnimalInput) -> Animal:
    animal = Animal.create(
        user_id=user_id,
        tag=payload.tag.strip(),
        name=payload.name.strip(),
        gender=payload.gender,
        breed=payload.breed.strip(),
        status=payload.status,
        birth_date=payload.birth_date,
        entry_date=payload.entry_date,
        ear_tag=payload.ear_tag,
        owner=payload.owner,
        farm=payload.farm,
        paddock=payload.paddock,
        purpose=payload.purpose,
        weight=payload.weight,
        category=payload.category,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created
