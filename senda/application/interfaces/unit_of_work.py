from __future__ import annotations

from typing import Protocol

from senda.application.interfaces.repositories.animals import AnimalRepository
from senda.application.interfaces.repositories.notification_reads import (
    NotificationReadRepository,
)
from senda.application.interfaces.repositories.reproductions import ReproductionRepository
from senda.application.interfaces.repositories.users import UserRepository
from senda.application.interfaces.repositories.vaccines import VaccineRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    vaccines: VaccineRepository
    reproductions: ReproductionRepository
    users: UserRepository
    notification_reads: NotificationReadRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
