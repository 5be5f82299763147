from __future__ import annotations

from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from senda.domain.models.vaccine import Vaccine


class VaccineRepository(Protocol):
    async def add(self, vaccine: Vaccine) -> Vaccine: ...

    async def list(
        self,
        user_id: UUID,
        *,
        animal_id: UUID | None = None,
        next_from: date | None = None,
        next_to: date | None = None,
        created_from: datetime | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Vaccine]: ...

    async def delete_for_animal(self, user_id: UUID, animal_id: UUID) -> int: ...
