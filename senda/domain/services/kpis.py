"""KPI aggregation over a user's in-memory herd.

All functions are pure: they receive the full record lists plus the reference
day and never touch storage. Dates must already be parsed; malformed input is
rejected at the API boundary.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Literal, Sequence
from uuid import UUID

from senda.domain.models.animal import Animal
from senda.domain.models.reproduction import GESTATION_DAYS, Reproduction
from senda.domain.models.vaccine import Vaccine
from senda.domain.value_objects.animal_status import AnimalStatus
from senda.domain.value_objects.display import NEUTRAL_COLOR, STATUS_DISPLAY, lookup, series_color
from senda.domain.value_objects.gender import Gender

DAYS_PER_YEAR = 365.25
AGE_BUCKETS: tuple[str, ...] = ("0-1", "1-3", "3+")
NO_DATA_LABEL = "Sin datos"
CHECKUP_PLACEHOLDERS = 5
CHECKUP_SPACING_DAYS = 3

EventKind = Literal["vaccination", "birth", "checkup"]


@dataclass(slots=True)
class Bucket:
    key: str
    label: str
    count: int
    percentage: float
    color: str


@dataclass(slots=True)
class VaccinationStatus:
    up_to_date: int
    pending: int


@dataclass(slots=True)
class KPISnapshot:
    total_animals: int
    healthy_animals: int
    sick_animals: int
    critical_animals: int
    pregnant_cows: int
    average_age: float
    average_weight: float
    up_to_date_vaccinations: int
    pending_vaccinations: int


@dataclass(slots=True)
class HerdMetrics:
    total: int
    males: int
    females: int
    pregnant: int
    not_pregnant: int
    average_age: float


@dataclass(slots=True)
class UpcomingEvent:
    id: str
    type: EventKind
    animal_id: UUID | None
    animal_name: str
    animal_tag: str
    date: date
    description: str


@dataclass(slots=True)
class GenderAgeRow:
    gender: str
    label: str
    buckets: dict[str, int] = field(default_factory=lambda: {b: 0 for b in AGE_BUCKETS})


def _percentage(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return count / total * 100


def age_in_years(birth_date: date, today: date) -> float:
    return round((today - birth_date).days / DAYS_PER_YEAR, 1)


def whole_years(birth_date: date, today: date) -> int:
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def age_label(birth_date: date | None, today: date) -> str:
    """Carnet age text: "N años", or "M meses" under one year."""
    if birth_date is None:
        return ""
    years = whole_years(birth_date, today)
    if years <= 0:
        months = (today - birth_date).days // 30
        return f"{max(months, 0)} meses"
    return f"{years} años"


def age_category(age: float) -> str:
    if age < 1:
        return "0-1"
    if age < 3:
        return "1-3"
    return "3+"


def average_age(animals: Iterable[Animal], today: date) -> float:
    ages = [
        (today - a.birth_date).days / DAYS_PER_YEAR for a in animals if a.birth_date is not None
    ]
    if not ages:
        return 0.0
    return round(sum(ages) / len(ages), 1)


def average_weight(animals: Iterable[Animal]) -> float:
    weights = [Decimal(a.weight) for a in animals if a.weight]
    if not weights:
        return 0.0
    return round(float(sum(weights) / len(weights)), 1)


def status_breakdown(animals: Sequence[Animal]) -> list[Bucket]:
    total = len(animals)
    counts = Counter(a.status for a in animals)
    keys = [s.value for s in AnimalStatus]
    # Statuses outside the known set keep their stored spelling
    keys.extend(k for k in counts if k not in keys)
    buckets = []
    for key in keys:
        display = lookup(STATUS_DISPLAY, key)
        buckets.append(
            Bucket(
                key=key,
                label=display.label,
                count=counts.get(key, 0),
                percentage=_percentage(counts.get(key, 0), total),
                color=display.color,
            )
        )
    return buckets


def ownership_breakdown(animals: Sequence[Animal]) -> list[Bucket]:
    total = len(animals)
    counts = Counter(a.owner for a in animals if a.owner)
    buckets = [
        Bucket(
            key=owner,
            label=owner,
            count=count,
            percentage=_percentage(count, total),
            color=series_color(index),
        )
        for index, (owner, count) in enumerate(counts.items())
    ]
    if not buckets:
        return [
            Bucket(key="none", label=NO_DATA_LABEL, count=0, percentage=100.0, color=NEUTRAL_COLOR)
        ]
    return buckets


def gender_age_breakdown(animals: Iterable[Animal], today: date) -> list[GenderAgeRow]:
    rows = {
        Gender.MALE.value: GenderAgeRow(gender=Gender.MALE.value, label="Macho"),
        Gender.FEMALE.value: GenderAgeRow(gender=Gender.FEMALE.value, label="Hembra"),
    }
    for animal in animals:
        if animal.birth_date is None:
            continue
        row = rows.get(animal.gender)
        if row is None:
            continue
        row.buckets[age_category((today - animal.birth_date).days / DAYS_PER_YEAR)] += 1
    return list(rows.values())


def vaccination_status(vaccines: Iterable[Vaccine], today: date) -> VaccinationStatus:
    up_to_date = 0
    pending = 0
    for vaccine in vaccines:
        if vaccine.next_date is None:
            continue
        if vaccine.next_date > today:
            up_to_date += 1
        else:
            pending += 1
    return VaccinationStatus(up_to_date=up_to_date, pending=pending)


def _latest_expected_births(reproductions: Iterable[Reproduction]) -> dict[UUID, date]:
    latest: dict[UUID, Reproduction] = {}
    for record in reproductions:
        if record.actual_birth_date is not None:
            continue
        current = latest.get(record.mother_id)
        if current is None or record.service_date > current.service_date:
            latest[record.mother_id] = record
    return {mother_id: r.expected_birth_date for mother_id, r in latest.items()}


def upcoming_events(
    animals: Sequence[Animal],
    vaccines: Iterable[Vaccine],
    today: date,
    horizon_days: int = 30,
    reproductions: Iterable[Reproduction] = (),
) -> list[UpcomingEvent]:
    events: list[UpcomingEvent] = []
    horizon = today + timedelta(days=horizon_days)

    for vaccine in vaccines:
        if vaccine.next_date is None or not vaccine.next_date < horizon:
            continue
        events.append(
            UpcomingEvent(
                id=f"vaccine-{vaccine.id}",
                type="vaccination",
                animal_id=vaccine.animal_id,
                animal_name=vaccine.animal_name or "",
                animal_tag=vaccine.animal_tag or "",
                date=vaccine.next_date,
                description=f"Vacuna {vaccine.vaccine_type} pendiente",
            )
        )

    births = _latest_expected_births(reproductions)
    for animal in animals:
        if animal.status != AnimalStatus.PREGNANT.value:
            continue
        # Without a recorded service, assume it happened today
        estimated = births.get(animal.id, today + timedelta(days=GESTATION_DAYS))
        events.append(
            UpcomingEvent(
                id=f"birth-{animal.id}",
                type="birth",
                animal_id=animal.id,
                animal_name=animal.name,
                animal_tag=animal.tag,
                date=estimated,
                description="Fecha estimada de parto",
            )
        )

    for index, animal in enumerate(animals[:CHECKUP_PLACEHOLDERS]):
        events.append(
            UpcomingEvent(
                id=f"checkup-{animal.id}",
                type="checkup",
                animal_id=animal.id,
                animal_name=animal.name,
                animal_tag=animal.tag,
                date=today + timedelta(days=CHECKUP_SPACING_DAYS * (index + 1)),
                description="Revisión veterinaria programada",
            )
        )

    # list.sort is stable: same-day events keep insertion order
    events.sort(key=lambda e: e.date)
    return events


def build_kpi_snapshot(
    animals: Sequence[Animal], vaccines: Sequence[Vaccine], today: date
) -> KPISnapshot:
    counts = Counter(a.status for a in animals)
    vaccination = vaccination_status(vaccines, today)
    return KPISnapshot(
        total_animals=len(animals),
        healthy_animals=counts.get(AnimalStatus.HEALTHY.value, 0),
        sick_animals=counts.get(AnimalStatus.SICK.value, 0),
        critical_animals=0,
        pregnant_cows=counts.get(AnimalStatus.PREGNANT.value, 0),
        average_age=average_age(animals, today),
        average_weight=average_weight(animals),
        up_to_date_vaccinations=vaccination.up_to_date,
        pending_vaccinations=vaccination.pending,
    )


def herd_metrics(animals: Sequence[Animal], today: date) -> HerdMetrics:
    males = sum(1 for a in animals if a.gender == Gender.MALE.value)
    females = sum(1 for a in animals if a.gender == Gender.FEMALE.value)
    pregnant = sum(1 for a in animals if a.status == AnimalStatus.PREGNANT.value)
    return HerdMetrics(
        total=len(animals),
        males=males,
        females=females,
        pregnant=pregnant,
        not_pregnant=max(females - pregnant, 0),
        average_age=average_age(animals, today),
    )
