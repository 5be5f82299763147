from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Literal
from uuid import UUID

from senda.domain.models.animal import Animal
from senda.domain.models.vaccine import Vaccine

DateRange = Literal["today", "week", "month", "all"]
ActivityKind = Literal["all", "animal", "vaccine"]

DATE_RANGE_DAYS: dict[str, int] = {"week": 7, "month": 30}
DATE_RANGE_LABELS: dict[str, str] = {
    "today": "Hoy",
    "week": "Última semana",
    "month": "Último mes",
    "all": "Todo",
}


@dataclass(slots=True)
class Activity:
    id: str
    type: Literal["animal", "vaccine"]
    record_id: UUID
    description: str
    occurred_at: datetime


@dataclass(slots=True)
class VaccineAlert:
    key: str
    vaccine_id: UUID
    animal_id: UUID
    title: str
    description: str
    due_date: date
    days_until: int
    when: str


def range_start(date_range: str, now: datetime) -> datetime | None:
    """Earliest creation time included by a report range; None means unbounded.

    "today" starts at midnight in the timezone of `now`.
    """
    if date_range == "all":
        return None
    if date_range == "today":
        return datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    days = DATE_RANGE_DAYS.get(date_range)
    if days is None:
        raise ValueError(f"Unknown date range: {date_range}")
    return now - timedelta(days=days)


def animal_activity(animal: Animal) -> Activity:
    return Activity(
        id=f"animal-{animal.id}",
        type="animal",
        record_id=animal.id,
        description=f"Nuevo animal registrado: {animal.name} ({animal.tag})",
        occurred_at=animal.created_at,
    )


def vaccine_activity(vaccine: Vaccine) -> Activity:
    return Activity(
        id=f"vaccine-{vaccine.id}",
        type="vaccine",
        record_id=vaccine.id,
        description=f"Vacuna {vaccine.vaccine_type} aplicada: {vaccine.animal_name or '-'}",
        occurred_at=vaccine.created_at,
    )


def _newest_first(activities: list[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda a: a.occurred_at, reverse=True)


def activity_feed(
    animals: Iterable[Animal],
    vaccines: Iterable[Vaccine],
    date_range: str,
    kind: str,
    now: datetime,
) -> list[Activity]:
    start = range_start(date_range, now)
    activities: list[Activity] = []
    if kind in ("all", "animal"):
        activities.extend(
            animal_activity(a) for a in animals if start is None or a.created_at >= start
        )
    if kind in ("all", "vaccine"):
        activities.extend(
            vaccine_activity(v) for v in vaccines if start is None or v.created_at >= start
        )
    return _newest_first(activities)


def recent_activity(
    animals: Iterable[Animal], vaccines: Iterable[Vaccine], limit: int = 5
) -> list[Activity]:
    activities = [animal_activity(a) for a in animals]
    activities.extend(vaccine_activity(v) for v in vaccines)
    return _newest_first(activities)[:limit]


def days_label(days_until: int) -> str:
    if days_until == 0:
        return "Hoy"
    if days_until == 1:
        return "Mañana"
    return f"En {days_until} días"


def vaccine_alerts(
    vaccines: Iterable[Vaccine], today: date, window_days: int = 7
) -> list[VaccineAlert]:
    """Alerts for vaccines due within [today, today + window_days], soonest first."""
    last_day = today + timedelta(days=window_days)
    alerts = []
    for vaccine in vaccines:
        if vaccine.next_date is None or not today <= vaccine.next_date <= last_day:
            continue
        days_until = (vaccine.next_date - today).days
        alerts.append(
            VaccineAlert(
                key=f"vaccine-{vaccine.id}",
                vaccine_id=vaccine.id,
                animal_id=vaccine.animal_id,
                title="Vacunación Pendiente",
                description=(
                    f"{vaccine.animal_name or '-'} ({vaccine.animal_tag or '-'}) "
                    f"necesita {vaccine.vaccine_type}"
                ),
                due_date=vaccine.next_date,
                days_until=days_until,
                when=days_label(days_until),
            )
        )
    alerts.sort(key=lambda a: a.due_date)
    return alerts
