"""Display attributes (Spanish label + color) for every enumerated value shown in views.

Values not present in a table fall back to the raw value and a neutral gray so
records with statuses written by older clients still render.
"""

from __future__ import annotations

from dataclasses import dataclass

from senda.domain.value_objects.animal_status import AnimalStatus
from senda.domain.value_objects.ear_tag import EarTagColor
from senda.domain.value_objects.gender import Gender

NEUTRAL_COLOR = "#6b7280"


@dataclass(frozen=True, slots=True)
class DisplayAttributes:
    label: str
    color: str


STATUS_DISPLAY: dict[str, DisplayAttributes] = {
    AnimalStatus.HEALTHY.value: DisplayAttributes(label="Saludable", color="#22c55e"),
    AnimalStatus.SICK.value: DisplayAttributes(label="Enfermo", color="#f97316"),
    AnimalStatus.PREGNANT.value: DisplayAttributes(label="Preñada", color="#3b82f6"),
}

EAR_TAG_DISPLAY: dict[str, DisplayAttributes] = {
    EarTagColor.RED.value: DisplayAttributes(label="Roja", color="#ef4444"),
    EarTagColor.GREEN.value: DisplayAttributes(label="Verde", color="#22c55e"),
    EarTagColor.YELLOW.value: DisplayAttributes(label="Amarilla", color="#eab308"),
    EarTagColor.SKY.value: DisplayAttributes(label="Celeste", color="#0ea5e9"),
}

GENDER_DISPLAY: dict[str, DisplayAttributes] = {
    Gender.MALE.value: DisplayAttributes(label="Macho", color="#3b82f6"),
    Gender.FEMALE.value: DisplayAttributes(label="Hembra", color="#ec4899"),
}

EVENT_DISPLAY: dict[str, DisplayAttributes] = {
    "vaccination": DisplayAttributes(label="Vacunación", color="#3b82f6"),
    "checkup": DisplayAttributes(label="Revisión", color="#22c55e"),
    "birth": DisplayAttributes(label="Parto", color="#a855f7"),
}

# Cycled for chart series without a fixed color (e.g. owners)
SERIES_PALETTE: tuple[str, ...] = (
    "#3b82f6",
    "#8b5cf6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    NEUTRAL_COLOR,
)


def lookup(table: dict[str, DisplayAttributes], value: str | None) -> DisplayAttributes:
    if value is None:
        return DisplayAttributes(label="-", color=NEUTRAL_COLOR)
    return table.get(value, DisplayAttributes(label=value, color=NEUTRAL_COLOR))


def series_color(index: int) -> str:
    return SERIES_PALETTE[index % len(SERIES_PALETTE)]
