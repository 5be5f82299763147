from __future__ import annotations

from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.services.activity import Activity, recent_activity


async def execute(uow: UnitOfWork, user_id: UUID, *, limit: int = 5) -> list[Activity]:
    animals = await uow.animals.list(user_id, order_by="created_at", descending=True, limit=limit)
    vaccines = await uow.vaccines.list(
        user_id, order_by="created_at", descending=True, limit=limit
    )
    return recent_activity(animals, vaccines, limit=limit)
