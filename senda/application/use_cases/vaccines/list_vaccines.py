from __future__ import annotations

from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.vaccine import Vaccine


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    *,
    animal_id: UUID | None = None,
) -> list[Vaccine]:
    return await uow.vaccines.list(user_id, animal_id=animal_id, order_by="date", descending=True)
