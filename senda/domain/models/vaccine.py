from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Vaccine:
    id: UUID
    user_id: UUID
    animal_id: UUID
    vaccine_type: str
    date: date
    next_date: date | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Embedded from the related animal when listed
    animal_name: str | None = None
    animal_tag: str | None = None

    @classmethod
    def create(
        cls,
        user_id: UUID,
        animal_id: UUID,
        vaccine_type: str,
        date: date,
        next_date: date | None = None,
        notes: str | None = None,
    ) -> Vaccine:
        return cls(
            id=uuid4(),
            user_id=user_id,
            animal_id=animal_id,
            vaccine_type=vaccine_type,
            date=date,
            next_date=next_date,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
