from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.services import kpis


@dataclass(slots=True)
class GeneralDashboardResult:
    kpis: kpis.KPISnapshot
    status_chart: list[kpis.Bucket]
    ownership_chart: list[kpis.Bucket]
    gender_age_chart: list[kpis.GenderAgeRow]
    upcoming_events: list[kpis.UpcomingEvent]
    owners: list[str]


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    *,
    today: date,
    owner: str | None = None,
    horizon_days: int = 30,
) -> GeneralDashboardResult:
    everyone = await uow.animals.list(user_id, order_by="created_at")
    animals = (
        await uow.animals.list(user_id, owner=owner, order_by="created_at") if owner else everyone
    )
    vaccines = await uow.vaccines.list(user_id)
    reproductions = await uow.reproductions.list(user_id)

    return GeneralDashboardResult(
        kpis=kpis.build_kpi_snapshot(animals, vaccines, today),
        status_chart=kpis.status_breakdown(animals),
        ownership_chart=kpis.ownership_breakdown(animals),
        gender_age_chart=kpis.gender_age_breakdown(animals, today),
        upcoming_events=kpis.upcoming_events(
            animals,
            vaccines,
            today,
            horizon_days=horizon_days,
            reproductions=reproductions,
        ),
        owners=sorted({a.owner for a in everyone if a.owner}),
    )
