"""Module: pagination."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a result set. ``number`` is 1-based, as shown to users."""

    items: list[T] = field(default_factory=list)
    number: int = 1
    size: int = 5
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.size else 0

    @property
    def is_empty(self) -> bool:
        return not self.items


def page_offset(page: int, size: int) -> int:
    # Handlers speak 1-based page numbers; SQL offsets are 0-based.
    return (max(page, 1) - 1) * size
