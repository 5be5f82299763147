from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4


class ServiceMethod(str, Enum):
    NATURAL = "natural"
    ARTIFICIAL = "artificial"


class ReproductionStatus(str, Enum):
    PENDING = "pending"
    BORN = "born"
    LOST = "lost"


GESTATION_DAYS = 278


def expected_birth_date(service_date: date) -> date:
    return service_date + timedelta(days=GESTATION_DAYS)


@dataclass(slots=True)
class Reproduction:
    id: UUID
    user_id: UUID
    mother_id: UUID
    father_id: UUID
    service_method: str
    service_date: date
    expected_birth_date: date
    actual_birth_date: date | None = None
    status: str = ReproductionStatus.PENDING.value
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        user_id: UUID,
        mother_id: UUID,
        father_id: UUID,
        service_method: str,
        service_date: date,
        notes: str | None = None,
    ) -> Reproduction:
        return cls(
            id=uuid4(),
            user_id=user_id,
            mother_id=mother_id,
            father_id=father_id,
            service_method=service_method,
            service_date=service_date,
            expected_birth_date=expected_birth_date(service_date),
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
