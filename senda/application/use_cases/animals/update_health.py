from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HealthUpdateInput:
    status: str
    deworming_date: date | None = None
    professional: str | None = None
    medications: str | None = None
    last_vet_check: date | None = None
    checkup_notes: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    animal_id: UUID,
    payload: HealthUpdateInput,
) -> Animal:
    """Only the status is persisted; the checkup fields have no column yet."""
    updated = await uow.animals.update(user_id, animal_id, {"status": payload.status})
    if not updated:
        raise NotFound("Animal not found")
    await uow.commit()
    logger.info("Health status updated for animal %s: %s", animal_id, payload.status)
    return updated
