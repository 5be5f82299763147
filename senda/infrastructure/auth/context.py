from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from senda.domain.models.user import User
from senda.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    """Identity of the caller, built per request and handed to every use case."""

    user_id: UUID
    email: str
    claims: dict[str, Any] = field(default_factory=dict)


async def fetch_user(session: AsyncSession, user_id: UUID) -> User | None:
    result = await session.execute(select(UserORM).where(UserORM.id == user_id))
    row = result.scalar_one_or_none()
    if row is None:
        return None
    return User(
        id=row.id,
        email=row.email,
        hashed_password=row.hashed_password,
        is_active=row.is_active,
        created_at=row.created_at,
    )
