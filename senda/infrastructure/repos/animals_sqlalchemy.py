from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from senda.application.errors import ConflictError, DataAccessError
from senda.application.interfaces.repositories.animals import AnimalRepository
from senda.domain.models.animal import Animal
from senda.infrastructure.db.orm.animal import AnimalORM
from senda.infrastructure.db.query import RecordQuery, backend_message, delete_where, flush_new
from senda.utils.datetime_tz import ensure_utc

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "gender",
        "birth_date",
        "entry_date",
        "breed",
        "status",
        "ear_tag",
        "owner",
        "farm",
        "paddock",
        "purpose",
        "weight",
        "category",
    }
)


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            user_id=orm.user_id,
            tag=orm.tag,
            name=orm.name,
            gender=orm.gender,
            breed=orm.breed,
            status=orm.status,
            birth_date=orm.birth_date,
            entry_date=orm.entry_date,
            ear_tag=orm.ear_tag,
            owner=orm.owner,
            farm=orm.farm,
            paddock=orm.paddock,
            purpose=orm.purpose,
            weight=orm.weight,
            category=orm.category,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            user_id=animal.user_id,
            tag=animal.tag,
            name=animal.name,
            gender=animal.gender,
            breed=animal.breed,
            status=animal.status,
            birth_date=animal.birth_date,
            entry_date=animal.entry_date,
            ear_tag=animal.ear_tag,
            owner=animal.owner,
            farm=animal.farm,
            paddock=animal.paddock,
            purpose=animal.purpose,
            weight=animal.weight,
            category=animal.category,
            created_at=animal.created_at,
        )
        await flush_new(self.session, orm, conflict_message="Animal tag already exists")
        return self._to_domain(orm)

    async def _get_orm(self, user_id: UUID, animal_id: UUID) -> AnimalORM | None:
        return await RecordQuery(AnimalORM, user_id).eq("id", animal_id).first(self.session)

    async def get(self, user_id: UUID, animal_id: UUID) -> Animal | None:
        orm = await self._get_orm(user_id, animal_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        user_id: UUID,
        *,
        owner: str | None = None,
        created_from: datetime | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[Animal]:
        query = RecordQuery(AnimalORM, user_id)
        if owner is not None:
            query = query.eq("owner", owner)
        if created_from is not None:
            query = query.gte("created_at", created_from)
        query = query.order(order_by or "created_at", ascending=not descending)
        if limit is not None:
            query = query.limit(limit)
        rows = await query.all(self.session)
        return [self._to_domain(row) for row in rows]

    async def update(self, user_id: UUID, animal_id: UUID, data: dict) -> Animal | None:
        orm = await self._get_orm(user_id, animal_id)
        if orm is None:
            return None
        for field_name, value in data.items():
            if field_name not in UPDATABLE_FIELDS:
                raise ValueError(f"Field {field_name!r} cannot be updated")
            setattr(orm, field_name, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        return self._to_domain(orm)

    async def delete(self, user_id: UUID, animal_id: UUID) -> bool:
        return await delete_where(self.session, AnimalORM, user_id, id=animal_id) > 0
