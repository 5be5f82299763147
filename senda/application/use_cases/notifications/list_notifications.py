from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from senda.application.interfaces.unit_of_work import UnitOfWork
from senda.domain.services.activity import VaccineAlert, vaccine_alerts


@dataclass(slots=True)
class NotificationItem:
    alert: VaccineAlert
    is_read: bool


@dataclass(slots=True)
class NotificationsResult:
    items: list[NotificationItem]
    unread: int


async def execute(
    uow: UnitOfWork, user_id: UUID, *, today: date, window_days: int = 7
) -> NotificationsResult:
    vaccines = await uow.vaccines.list(
        user_id,
        next_from=today,
        next_to=today + timedelta(days=window_days),
        order_by="next_date",
    )
    alerts = vaccine_alerts(vaccines, today, window_days=window_days)
    read_keys = await uow.notification_reads.list_keys(user_id)
    items = [NotificationItem(alert=alert, is_read=alert.key in read_keys) for alert in alerts]
    return NotificationsResult(items=items, unread=sum(1 for item in items if not item.is_read))
