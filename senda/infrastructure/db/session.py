from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from senda.application.errors import DataAccessError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.infrastructure.db.query import backend_message


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.animals = None
        self.vaccines = None
        self.reproductions = None
        self.users = None
        self.notification_reads = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from senda.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from senda.infrastructure.repos.notification_reads_sqlalchemy import (
            NotificationReadsSQLAlchemyRepository,
        )
        from senda.infrastructure.repos.reproductions_sqlalchemy import (
            ReproductionsSQLAlchemyRepository,
        )
        from senda.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository
        from senda.infrastructure.repos.vaccines_sqlalchemy import VaccinesSQLAlchemyRepository

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.vaccines = VaccinesSQLAlchemyRepository(self.session)
        self.reproductions = ReproductionsSQLAlchemyRepository(self.session)
        self.users = UsersSQLAlchemyRepository(self.session)
        self.notification_reads = NotificationReadsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.animals = None
            self.vaccines = None
            self.reproductions = None
            self.users = None
            self.notification_reads = None

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise DataAccessError(backend_message(exc)) from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
