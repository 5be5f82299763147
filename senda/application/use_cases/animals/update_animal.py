from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal

EDITABLE_FIELDS = (
    "name",
    "gender",
    "birth_date",
    "entry_date",
    "breed",
    "ear_tag",
    "farm",
    "owner",
    "paddock",
    "purpose",
    "weight",
    "category",
)


@dataclass(slots=True)
class UpdateAnimalInput:
    name: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    entry_date: date | None = None
    breed: str | None = None
    ear_tag: str | None = None
    farm: str | None = None
    owner: str | None = None
    paddock: str | None = None
    purpose: str | None = None
    weight: Decimal | None = None
    category: str | None = None


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    animal_id: UUID,
    payload: UpdateAnimalInput,
) -> Animal:
    existing = await uow.animals.get(user_id, animal_id)
    if not existing:
        raise NotFound("Animal not found")
    data = {
        field_name: getattr(payload, field_name)
        for field_name in EDITABLE_FIELDS
        if getattr(payload, field_name) is not None
    }
    if not data:
        return existing
    updated = await uow.animals.update(user_id, animal_id, data)
    if not updated:
        raise NotFound("Animal not found")
    await uow.commit()
    return updated
