from __future__ import annotations

from enum import Enum


class EarTagColor(str, Enum):
    """Physical ear-tag (caravana) color, unrelated to the record `tag` code."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    SKY = "sky"
