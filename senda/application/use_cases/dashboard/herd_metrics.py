from __future__ import annotations

from datetime import date
from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.services.kpis import HerdMetrics, herd_metrics


async def execute(uow: UnitOfWork, user_id: UUID, *, today: date) -> HerdMetrics:
    animals = await uow.animals.list(user_id)
    return herd_metrics(animals, today)
