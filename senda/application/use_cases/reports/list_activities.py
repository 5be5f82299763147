from __future__ import annotations

from datetime import datetime
from typing import get_args
from uuid import UUID

from senda.application.errors import ValidationError
from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.models.animal import Animal
from senda.domain.models.vaccine import Vaccine
from senda.domain.services.activity import (
    Activity,
    ActivityKind,
    DateRange,
    activity_feed,
    range_start,
)
from senda.utils.datetime_tz import ensure_utc


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    *,
    now: datetime,
    date_range: str = "week",
    kind: str = "all",
) -> list[Activity]:
    if date_range not in get_args(DateRange):
        raise ValidationError("Unknown date range", details={"date_range": date_range})
    if kind not in get_args(ActivityKind):
        raise ValidationError("Unknown activity type", details={"type": kind})

    start = range_start(date_range, now)
    if start is not None:
        # Stored timestamps are UTC
        start = ensure_utc(start)
    animals: list[Animal] = []
    vaccines: list[Vaccine] = []
    if kind in ("all", "animal"):
        animals = await uow.animals.list(
            user_id, created_from=start, order_by="created_at", descending=True
        )
    if kind in ("all", "vaccine"):
        vaccines = await uow.vaccines.list(
            user_id, created_from=start, order_by="created_at", descending=True
        )
    return activity_feed(animals, vaccines, date_range, kind, now)
