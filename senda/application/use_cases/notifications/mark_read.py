from __future__ import annotations

from datetime import date
from typing import Iterable
from uuid import UUID

from senda.application.errors import ValidationError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.application.use_cases.notifications import list_notifications


async def execute(uow: UnitOfWork, user_id: UUID, keys: Iterable[str]) -> int:
    keys = [key for key in keys if key]
    if not keys:
        raise ValidationError("At least one notification key is required")
    marked = await uow.notification_reads.mark(user_id, keys)
    await uow.commit()
    return marked


async def execute_all(
    uow: UnitOfWork, user_id: UUID, *, today: date, window_days: int = 7
) -> int:
    """Mark every notification currently shown to the user as read."""
    current = await list_notifications.execute(uow, user_id, today=today, window_days=window_days)
    keys = [item.alert.key for item in current.items if not item.is_read]
    if not keys:
        return 0
    marked = await uow.notification_reads.mark(user_id, keys)
    await uow.commit()
    return marked
