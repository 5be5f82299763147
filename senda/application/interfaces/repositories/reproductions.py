from __future__ import annotations

from typing import Protocol
from uuid import UUID

from senda.domain.models.reproduction import Reproduction


class ReproductionRepository(Protocol):
    async def add(self, record: Reproduction) -> Reproduction: ...

    async def list(self, user_id: UUID, *, mother_id: UUID | None = None) -> list[Reproduction]: ...

    async def delete_for_animal(self, user_id: UUID, animal_id: UUID) -> int: ...
