from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from senda.application.errors import DataAccessError
from senda.application.interfaces.repositories.users import UserRepository
from senda.domain.models.user import User
from senda.infrastructure.db.orm.user import UserORM
from senda.infrastructure.db.query import backend_message, flush_new
from senda.utils.datetime_tz import ensure_utc


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            hashed_password=orm.hashed_password,
            is_active=orm.is_active,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            is_active=user.is_active,
            created_at=user.created_at,
        )
        await flush_new(self.session, orm, conflict_message="Email already registered")
        return self._to_domain(orm)

    async def _one(self, stmt) -> User | None:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get(self, user_id: UUID) -> User | None:
        return await self._one(select(UserORM).where(UserORM.id == user_id))

    async def get_by_email(self, email: str) -> User | None:
        return await self._one(select(UserORM).where(UserORM.email == email.lower()))
