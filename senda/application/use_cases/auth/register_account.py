from __future__ import annotations

from dataclasses import dataclass

from senda.application.errors import ConflictError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.user import User
from senda.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class SelfRegisterInput:
    email: str
    password: str


@dataclass(slots=True)
class SelfRegisterResult:
    user_id: str
    email: str


async def execute(*, uow: UnitOfWork, payload: SelfRegisterInput, password_hasher: PasswordHasher) -> SelfRegisterResult:
    existing = await uow.users.get_by_email(payload.email)
    if existing:
        raise ConflictError("Email already registered")
    user = User.create(email=payload.email, hashed_password=password_hasher.hash(payload.password))
    created = await uow.users.add(user)
    await uow.commit()
    return SelfRegisterResult(user_id=str(created.id), email=created.email)
