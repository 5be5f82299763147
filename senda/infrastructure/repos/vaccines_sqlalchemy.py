from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from senda.application.interfaces.repositories.vaccines import VaccineRepository
from senda.domain.models.vaccine import Vaccine
from senda.infrastructure.db.orm.vaccine import VaccineORM
from senda.infrastructure.db.query import RecordQuery, delete_where, flush_new
from senda.utils.datetime_tz import ensure_utc

# Column names accepted by `order_by`, mapped to ORM attributes
ORDERABLE = {"date": "applied_on", "next_date": "next_date", "created_at": "created_at"}


class VaccinesSQLAlchemyRepository(VaccineRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccineORM) -> Vaccine:
        animal = orm.animal
        return Vaccine(
            id=orm.id,
            user_id=orm.user_id,
            animal_id=orm.animal_id,
            vaccine_type=orm.vaccine_type,
            date=orm.applied_on,
            next_date=orm.next_date,
            notes=orm.notes,
            created_at=ensure_utc(orm.created_at),
            animal_name=animal.name if animal else None,
            animal_tag=animal.tag if animal else None,
        )

    async def add(self, vaccine: Vaccine) -> Vaccine:
        orm = VaccineORM(
            id=vaccine.id,
            user_id=vaccine.user_id,
            animal_id=vaccine.animal_id,
            vaccine_type=vaccine.vaccine_type,
            applied_on=vaccine.date,
            next_date=vaccine.next_date,
            notes=vaccine.notes,
            created_at=vaccine.created_at,
        )
        await flush_new(self.session, orm, conflict_message="Vaccine record could not be stored")
        # Load the embedded animal for the response
        await self.session.refresh(orm, attribute_names=["animal"])
        return self._to_domain(orm)

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
    ) -> list[Vaccine]:
        query = RecordQuery(VaccineORM, user_id)
        if animal_id is not None:
            query = query.eq("animal_id", animal_id)
        if next_from is not None:
            query = query.gte("next_date", next_from)
        if next_to is not None:
            query = query.lte("next_date", next_to)
        if created_from is not None:
            query = query.gte("created_at", created_from)
        query = query.order(ORDERABLE.get(order_by or "created_at", "created_at"), ascending=not descending)
        if limit is not None:
            query = query.limit(limit)
        rows = await query.all(self.session)
        return [self._to_domain(row) for row in rows]

    async def delete_for_animal(self, user_id: UUID, animal_id: UUID) -> int:
        return await delete_where(self.session, VaccineORM, user_id, animal_id=animal_id)
