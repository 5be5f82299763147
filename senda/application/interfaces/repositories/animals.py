from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from senda.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, user_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        user_id: UUID,
        *,
        owner: str | None = None,
        created_from: datetime | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Animal]: ...

    async def update(self, user_id: UUID, animal_id: UUID, data: dict) -> Animal | None: ...

    async def delete(self, user_id: UUID, animal_id: UUID) -> bool: ...
