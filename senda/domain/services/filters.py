from __future__ import annotations

from datetime import date
from typing import Iterable, Literal

from senda.domain.models.animal import Animal
from senda.domain.value_objects.display import EAR_TAG_DISPLAY, GENDER_DISPLAY, STATUS_DISPLAY

FilterColumn = Literal[
    "tag", "name", "gender", "birth_date", "entry_date", "breed", "ear_tag", "status"
]
FILTER_COLUMNS: tuple[str, ...] = (
    "tag",
    "name",
    "gender",
    "birth_date",
    "entry_date",
    "breed",
    "ear_tag",
    "status",
)


def _contains(value: str | None, needle: str) -> bool:
    return needle in (value or "").lower()


def _iso(value: date | None) -> str:
    return value.isoformat() if value else ""


def _matches_label(stored: str | None, needle: str, table) -> bool:
    """Stored enum value matches `needle` directly or through its Spanish label."""
    if stored is None:
        return False
    attrs = table.get(stored)
    return attrs is not None and attrs.label.lower() == needle


def matches_search(animal: Animal, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    return (
        _contains(animal.name, needle)
        or _contains(animal.tag, needle)
        or _contains(animal.breed, needle)
    )


def matches_column(animal: Animal, column: str | None, value: str | None) -> bool:
    if not column or not value:
        return True
    needle = value.strip().lower()
    if column == "tag":
        return _contains(animal.tag, needle)
    if column == "name":
        return _contains(animal.name, needle)
    if column == "gender":
        return (animal.gender or "").lower() == needle or _matches_label(
            animal.gender, needle, GENDER_DISPLAY
        )
    if column == "birth_date":
        return value.strip() in _iso(animal.birth_date)
    if column == "entry_date":
        return value.strip() in _iso(animal.entry_date)
    if column == "breed":
        return _contains(animal.breed, needle)
    if column == "ear_tag":
        return _contains(animal.ear_tag, needle) or _matches_label(
            animal.ear_tag, needle, EAR_TAG_DISPLAY
        )
    if column == "status":
        return _contains(animal.status, needle) or _matches_label(
            animal.status, needle, STATUS_DISPLAY
        )
    return True


def filter_animals(
    animals: Iterable[Animal],
    search: str | None = None,
    column: str | None = None,
    value: str | None = None,
) -> list[Animal]:
    return [
        animal
        for animal in animals
        if matches_search(animal, search or "") and matches_column(animal, column, value)
    ]
