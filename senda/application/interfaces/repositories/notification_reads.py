from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID


class NotificationReadRepository(Protocol):
    async def mark(self, user_id: UUID, keys: Iterable[str]) -> int: ...

    async def list_keys(self, user_id: UUID) -> set[str]: ...
