from __future__ import annotations

from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal


async def execute(uow: UnitOfWork, user_id: UUID, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(user_id, animal_id)
    if not animal:
        raise NotFound("Animal not found")
    return animal
