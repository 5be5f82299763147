from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from senda.domain.models.animal import Animal
from senda.domain.services.filters import filter_animals, matches_column

USER = uuid4()


def make_animal(tag: str, name: str, gender: str, **overrides) -> Animal:
    values = {
        "user_id": USER,
        "tag": tag,
        "name": name,
        "gender": gender,
        "breed": "Hereford",
        "status": "healthy",
        "birth_date": date(2021, 3, 10),
        "entry_date": date(2022, 1, 5),
        "ear_tag": "red",
    }
    values.update(overrides)
    return Animal.create(**values)


@pytest.fixture()
def herd() -> list[Animal]:
    return [
        make_animal("SND-001", "Lucera", "female", breed="Angus", status="pregnant", ear_tag="sky"),
        make_animal("SND-002", "Tormenta", "male", ear_tag="yellow"),
        make_animal("SND-003", "Macho Alfa", "male", status="sick", birth_date=date(2019, 7, 1)),
        make_animal("XYZ-100", "Perla", "female", ear_tag="green"),
    ]


def test_search_matches_name_tag_or_breed_case_insensitive(herd):
    assert [a.name for a in filter_animals(herd, "luc")] == ["Lucera"]
    assert len(filter_animals(herd, "snd")) == 3
    assert [a.tag for a in filter_animals(herd, "ANGUS")] == ["SND-001"]


def test_blank_search_keeps_everything(herd):
    assert len(filter_animals(herd, "   ")) == 4
    assert len(filter_animals(herd)) == 4


def test_gender_filter_macho_returns_only_males(herd):
    result = filter_animals(herd, column="gender", value="macho")
    assert result
    assert all(a.gender == "male" for a in result)
    assert len(result) == 2


def test_gender_filter_accepts_stored_value(herd):
    assert {a.tag for a in filter_animals(herd, column="gender", value="female")} == {
        "SND-001",
        "XYZ-100",
    }


def test_ear_tag_filter_understands_spanish_label(herd):
    assert [a.tag for a in filter_animals(herd, column="ear_tag", value="Celeste")] == ["SND-001"]
    assert [a.tag for a in filter_animals(herd, column="ear_tag", value="yell")] == ["SND-002"]


def test_status_filter_understands_spanish_label(herd):
    assert [a.tag for a in filter_animals(herd, column="status", value="preñada")] == ["SND-001"]
    assert [a.tag for a in filter_animals(herd, column="status", value="enfermo")] == ["SND-003"]


def test_date_filter_is_substring_of_iso_text(herd):
    assert [a.tag for a in filter_animals(herd, column="birth_date", value="2019-07")] == ["SND-003"]


def test_search_and_column_filter_combine(herd):
    result = filter_animals(herd, "snd", column="gender", value="hembra")
    assert [a.tag for a in result] == ["SND-001"]


def test_missing_filter_value_matches(herd):
    assert matches_column(herd[0], "gender", "")
    assert matches_column(herd[0], None, "macho")
