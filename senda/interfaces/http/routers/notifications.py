from __future__ import annotations

from datetime import date as DtDate

from fastapi import APIRouter, Depends

from senda.application.use_cases.notifications import list_notifications, mark_read
from senda.config.settings import Settings
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_app_settings, get_auth_context, get_today, get_uow
from senda.interfaces.http.schemas.notifications import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationSchema,
    NotificationsResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationsResponse)
async def list_notifications_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> NotificationsResponse:
    result = await list_notifications.execute(
        uow, context.user_id, today=today, window_days=settings.notification_window_days
    )
    items = [
        NotificationSchema(
            key=item.alert.key,
            vaccine_id=item.alert.vaccine_id,
            animal_id=item.alert.animal_id,
            title=item.alert.title,
            description=item.alert.description,
            due_date=item.alert.due_date,
            days_until=item.alert.days_until,
            when=item.alert.when,
            is_read=item.is_read,
        )
        for item in result.items
    ]
    return NotificationsResponse(
        items=items, unread=result.unread, poll_seconds=settings.notification_poll_seconds
    )


@router.post("/read", response_model=MarkReadResponse)
async def mark_read_endpoint(
    payload: MarkReadRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MarkReadResponse:
    marked = await mark_read.execute(uow, context.user_id, payload.keys)
    return MarkReadResponse(marked=marked)


@router.post("/read-all", response_model=MarkReadResponse)
async def mark_all_read_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> MarkReadResponse:
    marked = await mark_read.execute_all(
        uow, context.user_id, today=today, window_days=settings.notification_window_days
    )
    return MarkReadResponse(marked=marked)
