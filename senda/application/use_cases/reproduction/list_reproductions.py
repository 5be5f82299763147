from __future__ import annotations

from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.reproduction import Reproduction


async def execute(
    uow: UnitOfWork, user_id: UUID, *, mother_id: UUID | None = None
) -> list[Reproduction]:
    return await uow.reproductions.list(user_id, mother_id=mother_id)
