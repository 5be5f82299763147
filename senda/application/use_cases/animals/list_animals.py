from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from senda.application.errors import ValidationError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal
from senda.domain.services.filters import FILTER_COLUMNS, filter_animals


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    *,
    search: str | None = None,
    filter_column: str | None = None,
    filter_value: str | None = None,
) -> ListAnimalsResult:
    if filter_column and filter_column not in FILTER_COLUMNS:
        raise ValidationError(
            "Unknown filter column",
            details={"filter_column": filter_column, "allowed": list(FILTER_COLUMNS)},
        )
    animals = await uow.animals.list(user_id, order_by="created_at", descending=True)
    items = filter_animals(animals, search, filter_column, filter_value)
    return ListAnimalsResult(items=items, total=len(animals))
