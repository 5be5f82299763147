from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from senda.domain.models.animal import Animal
from senda.domain.models.reproduction import Reproduction, expected_birth_date
from senda.domain.models.vaccine import Vaccine
from senda.domain.services import kpis

TODAY = date(2024, 10, 5)
USER = uuid4()


def make_animal(**overrides) -> Animal:
    values = {
        "user_id": USER,
        "tag": f"T-{uuid4().hex[:6]}",
        "name": "Vaca",
        "gender": "female",
        "breed": "Angus",
        "status": "healthy",
        "birth_date": date(2020, 10, 5),
        "owner": "Norte",
        "weight": Decimal("400"),
    }
    values.update(overrides)
    return Animal.create(**values)


def make_vaccine(next_date: date | None, **overrides) -> Vaccine:
    values = {
        "user_id": USER,
        "animal_id": uuid4(),
        "vaccine_type": "Aftosa",
        "date": TODAY - timedelta(days=30),
        "next_date": next_date,
    }
    values.update(overrides)
    vaccine = Vaccine.create(**values)
    vaccine.animal_name = "Lucera"
    vaccine.animal_tag = "SND-001"
    return vaccine


def test_age_in_years_exact_years_is_whole():
    assert kpis.age_in_years(date(2020, 10, 5), date(2024, 10, 5)) == 4.0
    assert kpis.age_in_years(date(2023, 10, 5), date(2024, 10, 5)) == 1.0


def test_age_in_years_rounds_to_one_decimal():
    assert kpis.age_in_years(date(2024, 4, 5), TODAY) == 0.5


def test_age_category_buckets():
    assert kpis.age_category(0.4) == "0-1"
    assert kpis.age_category(1.0) == "1-3"
    assert kpis.age_category(2.9) == "1-3"
    assert kpis.age_category(3.0) == "3+"


def test_age_label_uses_months_under_one_year():
    assert kpis.age_label(date(2024, 6, 1), TODAY) == "4 meses"
    assert kpis.age_label(date(2020, 10, 6), TODAY) == "3 años"
    assert kpis.age_label(None, TODAY) == ""


def test_status_breakdown_empty_is_all_zero():
    buckets = kpis.status_breakdown([])
    assert [b.key for b in buckets] == ["healthy", "sick", "pregnant"]
    assert all(b.count == 0 and b.percentage == 0 for b in buckets)


def test_status_breakdown_percentages_sum_to_100():
    animals = [
        make_animal(status="healthy"),
        make_animal(status="healthy"),
        make_animal(status="sick"),
        make_animal(status="pregnant"),
        make_animal(status="pregnant"),
        make_animal(status="pregnant"),
    ]
    buckets = kpis.status_breakdown(animals)
    assert sum(b.percentage for b in buckets) == pytest.approx(100.0)
    by_key = {b.key: b for b in buckets}
    assert by_key["healthy"].count == 2
    assert by_key["pregnant"].percentage == pytest.approx(50.0)
    assert by_key["healthy"].label == "Saludable"


def test_status_breakdown_keeps_unknown_status():
    buckets = kpis.status_breakdown([make_animal(status="healthy"), make_animal(status="quarantine")])
    by_key = {b.key: b for b in buckets}
    assert by_key["quarantine"].count == 1
    assert by_key["quarantine"].label == "quarantine"
    assert sum(b.percentage for b in buckets) == pytest.approx(100.0)


def test_ownership_breakdown_without_owners_is_synthetic_bucket():
    buckets = kpis.ownership_breakdown([make_animal(owner=None), make_animal(owner="")])
    assert len(buckets) == 1
    assert buckets[0].label == "Sin datos"
    assert buckets[0].percentage == 100.0


def test_ownership_breakdown_counts_each_owner():
    animals = [make_animal(owner="Norte"), make_animal(owner="Sur"), make_animal(owner="Norte")]
    buckets = {b.label: b for b in kpis.ownership_breakdown(animals)}
    assert buckets["Norte"].count == 2
    assert buckets["Sur"].percentage == pytest.approx(100 / 3)


def test_vaccination_status_boundaries():
    vaccines = [
        make_vaccine(TODAY + timedelta(days=1)),
        make_vaccine(TODAY),
        make_vaccine(TODAY - timedelta(days=10)),
        make_vaccine(None),
    ]
    status = kpis.vaccination_status(vaccines, TODAY)
    assert status.up_to_date == 1
    # A next date equal to today counts as pending
    assert status.pending == 2


def test_future_next_date_is_never_pending():
    for offset in (1, 15, 400):
        status = kpis.vaccination_status([make_vaccine(TODAY + timedelta(days=offset))], TODAY)
        assert status.pending == 0
        assert status.up_to_date == 1


def test_average_weight_skips_missing_weights():
    animals = [make_animal(weight=Decimal("400")), make_animal(weight=Decimal("451")), make_animal(weight=None)]
    assert kpis.average_weight(animals) == 425.5
    assert kpis.average_weight([]) == 0.0


def test_average_age_empty_is_zero():
    assert kpis.average_age([], TODAY) == 0.0
    assert kpis.average_age([make_animal(birth_date=None)], TODAY) == 0.0


def test_expected_birth_date_is_278_days_after_service():
    assert expected_birth_date(date(2024, 1, 1)) == date(2024, 10, 5)


def test_gender_age_breakdown_counts_by_bucket():
    animals = [
        make_animal(gender="male", birth_date=date(2024, 5, 1)),
        make_animal(gender="female", birth_date=date(2022, 10, 5)),
        make_animal(gender="female", birth_date=date(2015, 1, 1)),
        make_animal(gender="female", birth_date=None),
    ]
    rows = {row.gender: row for row in kpis.gender_age_breakdown(animals, TODAY)}
    assert rows["male"].buckets == {"0-1": 1, "1-3": 0, "3+": 0}
    assert rows["female"].buckets == {"0-1": 0, "1-3": 1, "3+": 1}


def test_gender_age_breakdown_buckets_unrounded_age():
    # 354 and 1094 days old round up to 1.0 and 3.0 years
    today = date(2026, 10, 19)
    animals = [
        make_animal(gender="male", birth_date=today - timedelta(days=354)),
        make_animal(gender="female", birth_date=today - timedelta(days=1094)),
    ]
    rows = {row.gender: row for row in kpis.gender_age_breakdown(animals, today)}
    assert rows["male"].buckets == {"0-1": 1, "1-3": 0, "3+": 0}
    assert rows["female"].buckets == {"0-1": 0, "1-3": 1, "3+": 0}


def test_upcoming_events_are_sorted_and_bounded():
    cow = make_animal(status="pregnant", name="Lucera", tag="SND-001")
    steer = make_animal(gender="male", name="Toro", tag="SND-002")
    vaccines = [
        make_vaccine(TODAY + timedelta(days=10)),
        make_vaccine(TODAY + timedelta(days=30)),  # outside the 30-day horizon
        make_vaccine(TODAY - timedelta(days=2)),
    ]
    events = kpis.upcoming_events([cow, steer], vaccines, TODAY)

    dates = [e.date for e in events]
    assert dates == sorted(dates)
    kinds = [e.type for e in events]
    assert kinds.count("vaccination") == 2
    assert kinds.count("checkup") == 2
    birth = next(e for e in events if e.type == "birth")
    assert birth.date == TODAY + timedelta(days=278)
    assert birth.animal_tag == "SND-001"


def test_upcoming_events_birth_uses_latest_service():
    cow = make_animal(status="pregnant")
    older = Reproduction.create(USER, cow.id, uuid4(), "natural", date(2024, 1, 1))
    newer = Reproduction.create(USER, cow.id, uuid4(), "natural", date(2024, 3, 1))
    events = kpis.upcoming_events([cow], [], TODAY, reproductions=[older, newer])
    birth = next(e for e in events if e.type == "birth")
    assert birth.date == date(2024, 3, 1) + timedelta(days=278)


def test_checkup_placeholders_limited_to_five():
    animals = [make_animal() for _ in range(7)]
    events = kpis.upcoming_events(animals, [], TODAY)
    checkups = [e for e in events if e.type == "checkup"]
    assert len(checkups) == 5
    assert [c.date for c in checkups] == [TODAY + timedelta(days=3 * (i + 1)) for i in range(5)]


def test_same_day_events_keep_insertion_order():
    animal = make_animal()
    vaccine = make_vaccine(TODAY + timedelta(days=3), animal_id=animal.id)
    events = kpis.upcoming_events([animal], [vaccine], TODAY)
    assert [e.type for e in events] == ["vaccination", "checkup"]


def test_build_kpi_snapshot():
    animals = [
        make_animal(status="healthy", weight=Decimal("300")),
        make_animal(status="sick", weight=Decimal("500")),
        make_animal(status="pregnant", weight=None),
    ]
    vaccines = [make_vaccine(TODAY), make_vaccine(TODAY + timedelta(days=5))]
    snapshot = kpis.build_kpi_snapshot(animals, vaccines, TODAY)
    assert snapshot.total_animals == 3
    assert snapshot.healthy_animals == 1
    assert snapshot.sick_animals == 1
    assert snapshot.pregnant_cows == 1
    assert snapshot.critical_animals == 0
    assert snapshot.average_weight == 400.0
    assert snapshot.average_age == 4.0
    assert snapshot.pending_vaccinations == 1
    assert snapshot.up_to_date_vaccinations == 1


def test_herd_metrics():
    animals = [
        make_animal(gender="male"),
        make_animal(gender="female", status="pregnant"),
        make_animal(gender="female"),
        make_animal(gender="female"),
    ]
    metrics = kpis.herd_metrics(animals, TODAY)
    assert metrics.total == 4
    assert metrics.males == 1
    assert metrics.females == 3
    assert metrics.pregnant == 1
    assert metrics.not_pregnant == 2
