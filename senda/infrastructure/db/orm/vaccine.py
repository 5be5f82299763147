from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from senda.infrastructure.db.base import Base
from senda.infrastructure.db.orm.animal import AnimalORM


class VaccineORM(Base):
    __tablename__ = "vaccines"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    vaccine_type: Mapped[str] = mapped_column(String(255), nullable=False)
    # attribute renamed so it does not shadow datetime.date
    applied_on: Mapped[date] = mapped_column("date", Date, nullable=False)
    next_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    animal: Mapped[AnimalORM] = relationship(lazy="joined")
