"""User-scoped query builder shared by the repositories.

Every query starts from `RecordQuery(Model, user_id)`, so rows owned by other
users are never visible. Backend failures surface once as `DataAccessError`
(no retries); callers decide how to log and report them.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from senda.application.errors import ConflictError, DataAccessError

T = TypeVar("T")


def backend_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig or exc)


class RecordQuery(Generic[T]):
    def __init__(self, model: type[T], user_id: UUID) -> None:
        self._model = model
        self._stmt: Select = select(model).where(self._column("user_id") == user_id)

    def _column(self, name: str) -> InstrumentedAttribute:
        column = getattr(self._model, name, None)
        if not isinstance(column, InstrumentedAttribute):
            raise ValueError(f"{self._model.__name__} has no column {name!r}")
        return column

    def eq(self, column: str, value: Any) -> RecordQuery[T]:
        self._stmt = self._stmt.where(self._column(column) == value)
        return self

    def gte(self, column: str, value: Any) -> RecordQuery[T]:
        self._stmt = self._stmt.where(self._column(column) >= value)
        return self

    def lte(self, column: str, value: Any) -> RecordQuery[T]:
        self._stmt = self._stmt.where(self._column(column) <= value)
        return self

    def order(self, column: str, *, ascending: bool = True) -> RecordQuery[T]:
        col = self._column(column)
        self._stmt = self._stmt.order_by(col.asc() if ascending else col.desc())
        return self

    def limit(self, count: int) -> RecordQuery[T]:
        self._stmt = self._stmt.limit(count)
        return self

    @property
    def statement(self) -> Select:
        return self._stmt

    async def all(self, session: AsyncSession) -> list[T]:
        try:
            result = await session.execute(self._stmt)
        except SQLAlchemyError as exc:
            raise DataAccessError(backend_message(exc)) from exc
        return list(result.scalars().all())

    async def first(self, session: AsyncSession) -> T | None:
        rows = await self.limit(1).all(session)
        return rows[0] if rows else None


async def flush_new(session: AsyncSession, orm: Any, *, conflict_message: str) -> None:
    session.add(orm)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise ConflictError(conflict_message, details={"backend": backend_message(exc)}) from exc
    except SQLAlchemyError as exc:
        raise DataAccessError(backend_message(exc)) from exc


async def delete_where(session: AsyncSession, model: type, user_id: UUID, **equals: Any) -> int:
    stmt = delete(model).where(model.user_id == user_id)
    for name, value in equals.items():
        stmt = stmt.where(getattr(model, name) == value)
    try:
        result = await session.execute(stmt)
    except SQLAlchemyError as exc:
        raise DataAccessError(backend_message(exc)) from exc
    return result.rowcount or 0
