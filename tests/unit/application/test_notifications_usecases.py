from __future__ import annotations

from datetime import date, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

from senda.application.errors import ValidationError
from senda.application.use_cases.notifications import list_notifications, mark_read
from senda.domain.models.vaccine import Vaccine

TODAY = date(2024, 10, 5)


class StubVaccines:
    def __init__(self, vaccines):
        self.vaccines = vaccines
        self.calls: list[dict] = []

    async def list(self, user_id, **kwargs):
        self.calls.append(kwargs)
        return self.vaccines


class StubReads:
    def __init__(self, keys=()):
        self.keys = set(keys)

    async def list_keys(self, user_id):
        return set(self.keys)

    async def mark(self, user_id, keys):
        fresh = [k for k in keys if k not in self.keys]
        self.keys.update(fresh)
        return len(fresh)


def make_uow(vaccines, reads):
    async def commit():
        return None

    return SimpleNamespace(vaccines=vaccines, notification_reads=reads, commit=commit)


def make_vaccine(days: int) -> Vaccine:
    vaccine = Vaccine.create(uuid4(), uuid4(), "Aftosa", TODAY, next_date=TODAY + timedelta(days=days))
    vaccine.animal_name = "Lucera"
    vaccine.animal_tag = "SND-001"
    return vaccine


@pytest.mark.asyncio
async def test_list_notifications_marks_read_state():
    first, second = make_vaccine(1), make_vaccine(3)
    reads = StubReads({f"vaccine-{first.id}"})
    vaccines = StubVaccines([first, second])
    result = await list_notifications.execute(make_uow(vaccines, reads), uuid4(), today=TODAY)
    assert [item.is_read for item in result.items] == [True, False]
    assert result.unread == 1
    assert vaccines.calls[0]["next_from"] == TODAY
    assert vaccines.calls[0]["next_to"] == TODAY + timedelta(days=7)


@pytest.mark.asyncio
async def test_mark_read_requires_keys():
    with pytest.raises(ValidationError):
        await mark_read.execute(make_uow(StubVaccines([]), StubReads()), uuid4(), [])


@pytest.mark.asyncio
async def test_mark_all_read_only_marks_unread():
    first, second = make_vaccine(0), make_vaccine(2)
    reads = StubReads({f"vaccine-{first.id}"})
    uow = make_uow(StubVaccines([first, second]), reads)
    assert await mark_read.execute_all(uow, uuid4(), today=TODAY) == 1
    assert await mark_read.execute_all(uow, uuid4(), today=TODAY) == 0
