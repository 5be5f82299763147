from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class Animal:
    id: UUID
    user_id: UUID
    tag: str
    name: str
    gender: str
    breed: str
    status: str
    birth_date: date | None = None
    entry_date: date | None = None
    ear_tag: str | None = None
    owner: str | None = None
    farm: str | None = None
    paddock: str | None = None
    purpose: str | None = None
    weight: Decimal | None = None
    category: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        user_id: UUID,
        tag: str,
        name: str,
        gender: str,
        breed: str,
        status: str,
        birth_date: date | None = None,
        entry_date: date | None = None,
        ear_tag: str | None = None,
        owner: str | None = None,
        farm: str | None = None,
        paddock: str | None = None,
        purpose: str | None = None,
        weight: Decimal | None = None,
        category: str | None = None,
    ) -> Animal:
        return cls(
            id=uuid4(),
            user_id=user_id,
            tag=tag,
            name=name,
            gender=gender,
            breed=breed,
            status=status,
            birth_date=birth_date,
            entry_date=entry_date,
            ear_tag=ear_tag,
            owner=owner,
            farm=farm,
            paddock=paddock,
            purpose=purpose,
            weight=weight,
            category=category,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.tag})"
