from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from senda.application.errors import DataAccessError
from senda.application.interfaces.repositories.notification_reads import (
    NotificationReadRepository,
)
from senda.infrastructure.db.orm.notification_read import NotificationReadORM
from senda.infrastructure.db.query import backend_message
from senda.utils.datetime_tz import utcnow


class NotificationReadsSQLAlchemyRepository(NotificationReadRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_keys(self, user_id: UUID) -> set[str]:
        stmt = select(NotificationReadORM.key).where(NotificationReadORM.user_id == user_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        return set(result.scalars().all())

    async def mark(self, user_id: UUID, keys: Iterable[str]) -> int:
        """Record read marks; keys already marked are left untouched."""
        existing = await self.list_keys(user_id)
        fresh = [key for key in dict.fromkeys(keys) if key not in existing]
        now = utcnow()
        self.session.add_all(
            NotificationReadORM(user_id=user_id, key=key, read_at=now) for key in fresh
        )
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        return len(fresh)
