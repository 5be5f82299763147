from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from senda.infrastructure.auth.context import AuthContext


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    email: str
    claims: dict[str, Any]


async def execute(*, context: AuthContext) -> MeResult:
    return MeResult(user_id=context.user_id, email=context.email, claims=context.claims)
