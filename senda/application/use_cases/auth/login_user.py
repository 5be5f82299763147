from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from senda.application.errors import AuthError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.infrastructure.auth.jwt_service import JWTService
from senda.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    user_id: UUID
    email: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> LoginResult:
    user = await uow.users.get_by_email(payload.email.lower())
    if not user or not user.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid credentials")

    token = jwt_service.create_access_token(subject=user.id, extra_claims={"email": user.email})
    return LoginResult(
        access_token=token,
        token_type="bearer",
        user_id=user.id,
        email=user.email,
    )
