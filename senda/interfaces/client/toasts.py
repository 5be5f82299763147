from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ToastVariant = Literal["default", "destructive"]


@dataclass(slots=True, frozen=True)
class Toast:
    title: str
    description: str
    variant: ToastVariant = "default"


@dataclass(slots=True)
class ToastQueue:
    """Transient notifications raised by views and forms, drained by the shell."""

    items: list[Toast] = field(default_factory=list)

    def success(self, title: str, description: str) -> Toast:
        toast = Toast(title=title, description=description)
        self.items.append(toast)
        return toast

    def error(self, title: str, description: str) -> Toast:
        toast = Toast(title=title, description=description, variant="destructive")
        self.items.append(toast)
        return toast

    def drain(self) -> list[Toast]:
        items, self.items = self.items, []
        return items
