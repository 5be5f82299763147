from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from pydantic import BaseModel, Field


class NotificationSchema(BaseModel):
    key: str
    vaccine_id: UUID
    animal_id: UUID
    title: str
    description: str
    due_date: DtDate
    days_until: int
    when: str
    is_read: bool


class NotificationsResponse(BaseModel):
    items: list[NotificationSchema]
    unread: int
    poll_seconds: int


class MarkReadRequest(BaseModel):
    keys: list[str] = Field(min_length=1)


class MarkReadResponse(BaseModel):
    marked: int
