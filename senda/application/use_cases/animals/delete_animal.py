from __future__ import annotations

import logging
from uuid import UUID

from senda.application.errors import NotFound
from senda.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, user_id: UUID, animal_id: UUID) -> None:
    existing = await uow.animals.get(user_id, animal_id)
    if not existing:
        raise NotFound("Animal not found")
    # Foreign-key cascades are not guaranteed on every backend
    vaccines = await uow.vaccines.delete_for_animal(user_id, animal_id)
    reproductions = await uow.reproductions.delete_for_animal(user_id, animal_id)
    await uow.animals.delete(user_id, animal_id)
    await uow.commit()
    logger.info(
        "Deleted animal %s with %d vaccines and %d reproduction records",
        animal_id,
        vaccines,
        reproductions,
    )
