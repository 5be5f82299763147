from __future__ import annotations

from datetime import date as DtDate

from fastapi import APIRouter, Depends, Query

from senda.application.use_cases.dashboard import general_dashboard, herd_metrics
from senda.config.settings import Settings
from senda.domain.value_objects.display import EVENT_DISPLAY, lookup
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_app_settings, get_auth_context, get_today, get_uow
from senda.interfaces.http.schemas.dashboard import (
    ChartBucket,
    GeneralDashboardResponse,
    GenderAgeRowSchema,
    HerdMetricsResponse,
    KPISnapshotSchema,
    UpcomingEventSchema,
)
from senda.utils.datetime_tz import format_long_date

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/general", response_model=GeneralDashboardResponse)
async def general_dashboard_endpoint(
    owner: str | None = Query(None, description="Restrict figures to one owner; 'all' or empty for every animal"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> GeneralDashboardResponse:
    selected = owner if owner and owner != "all" else None
    result = await general_dashboard.execute(
        uow,
        context.user_id,
        today=today,
        owner=selected,
        horizon_days=settings.upcoming_events_horizon_days,
    )
    events = []
    for event in result.upcoming_events:
        data = UpcomingEventSchema.model_validate(event).model_dump()
        data["color"] = lookup(EVENT_DISPLAY, event.type).color
        data["date_label"] = format_long_date(event.date)
        events.append(UpcomingEventSchema.model_validate(data))
    return GeneralDashboardResponse(
        kpis=KPISnapshotSchema.model_validate(result.kpis),
        status_chart=[ChartBucket.model_validate(b) for b in result.status_chart],
        ownership_chart=[ChartBucket.model_validate(b) for b in result.ownership_chart],
        gender_age_chart=[GenderAgeRowSchema.model_validate(r) for r in result.gender_age_chart],
        upcoming_events=events,
        owners=result.owners,
        owner=selected,
    )


@router.get("/metrics", response_model=HerdMetricsResponse)
async def herd_metrics_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
) -> HerdMetricsResponse:
    result = await herd_metrics.execute(uow, context.user_id, today=today)
    return HerdMetricsResponse.model_validate(result)
