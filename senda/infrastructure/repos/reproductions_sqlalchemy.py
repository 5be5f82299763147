from __future__ import annotations

from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from senda.application.errors import DataAccessError
from senda.application.interfaces.repositories.reproductions import ReproductionRepository
from senda.domain.models.reproduction import Reproduction, ReproductionStatus
from senda.infrastructure.db.orm.reproduction import ReproductionORM
from senda.infrastructure.db.query import RecordQuery, backend_message, flush_new
from senda.utils.datetime_tz import ensure_utc


class ReproductionsSQLAlchemyRepository(ReproductionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ReproductionORM) -> Reproduction:
        return Reproduction(
            id=orm.id,
            user_id=orm.user_id,
            mother_id=orm.mother_id,
            father_id=orm.father_id,
            service_method=orm.service_method,
            service_date=orm.service_date,
            expected_birth_date=orm.expected_birth_date,
            actual_birth_date=orm.actual_birth_date,
            status=orm.status or ReproductionStatus.PENDING.value,
            notes=orm.notes,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, record: Reproduction) -> Reproduction:
        orm = ReproductionORM(
            id=record.id,
            user_id=record.user_id,
            mother_id=record.mother_id,
            father_id=record.father_id,
            service_method=record.service_method,
            service_date=record.service_date,
            expected_birth_date=record.expected_birth_date,
            actual_birth_date=record.actual_birth_date,
            status=record.status,
            notes=record.notes,
            created_at=record.created_at,
        )
        await flush_new(self.session, orm, conflict_message="Reproduction could not be stored")
        return self._to_domain(orm)

    async def list(self, user_id: UUID, *, mother_id: UUID | None = None) -> list[Reproduction]:
        query = RecordQuery(ReproductionORM, user_id)
        if mother_id is not None:
            query = query.eq("mother_id", mother_id)
        rows = await query.order("service_date", ascending=False).all(self.session)
        return [self._to_domain(row) for row in rows]

    async def delete_for_animal(self, user_id: UUID, animal_id: UUID) -> int:
        # An animal may appear on either side of a service record
        query = RecordQuery(ReproductionORM, user_id)
        stmt = query.statement.where(
            or_(ReproductionORM.mother_id == animal_id, ReproductionORM.father_id == animal_id)
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.scalars().all()
            for row in rows:
                await self.session.delete(row)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        return len(rows)
