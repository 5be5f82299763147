from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ActivitySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: Literal["animal", "vaccine"]
    record_id: UUID
    description: str
    occurred_at: datetime
    occurred_at_label: str | None = None
    time_ago: str | None = None


class ActivitiesResponse(BaseModel):
    date_range: str
    date_range_label: str
    type: str
    items: list[ActivitySchema]
    empty_message: str | None = None


class RecentActivityResponse(BaseModel):
    items: list[ActivitySchema]
