from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from senda.application.use_cases.reports import list_activities, recent_activity
from senda.domain.services.activity import DATE_RANGE_LABELS, Activity
from senda.config.settings import Settings
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from senda.interfaces.http.schemas.reports import (
    ActivitiesResponse,
    ActivitySchema,
    RecentActivityResponse,
)
from senda.utils.datetime_tz import format_long_date, format_time_ago, local_now, utcnow

router = APIRouter(prefix="/reports", tags=["reports"])

NO_ACTIVITY_MESSAGE = "No hay actividades para mostrar"


def _to_schema(activity: Activity, now: datetime) -> ActivitySchema:
    data = ActivitySchema.model_validate(activity).model_dump()
    data["occurred_at_label"] = format_long_date(activity.occurred_at, include_time=True)
    data["time_ago"] = format_time_ago(activity.occurred_at, now)
    return ActivitySchema.model_validate(data)


@router.get("/activities", response_model=ActivitiesResponse)
async def list_activities_endpoint(
    date_range: str = Query("week", description="today, week, month or all"),
    type: str = Query("all", description="all, animal or vaccine"),  # noqa: A002
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> ActivitiesResponse:
    now = local_now(settings.app_timezone)
    items = await list_activities.execute(
        uow, context.user_id, now=now, date_range=date_range, kind=type
    )
    schemas = [_to_schema(item, now) for item in items]
    return ActivitiesResponse(
        date_range=date_range,
        date_range_label=DATE_RANGE_LABELS[date_range],
        type=type,
        items=schemas,
        empty_message=None if schemas else NO_ACTIVITY_MESSAGE,
    )


@router.get("/recent", response_model=RecentActivityResponse)
async def recent_activity_endpoint(
    limit: int = Query(5, ge=1, le=50),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> RecentActivityResponse:
    now = utcnow()
    items = await recent_activity.execute(uow, context.user_id, limit=limit)
    return RecentActivityResponse(items=[_to_schema(item, now) for item in items])
