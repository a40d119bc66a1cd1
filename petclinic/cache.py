"""Read-through cache in front of the vet listing.

Vets and specialties are reference data that only change through seeding,
so the cache never expires and nothing invalidates it on write. A stale
listing lasts until the process restarts or ``clear()`` is called.
"""

from __future__ import annotations

from collections.abc import Callable

from petclinic.core.logging import get_logger
from petclinic.domain.vets import Vet
from petclinic.repositories.pagination import Page

logger = get_logger(__name__)


class VetCache:
    def __init__(self):
        self._all: list[Vet] | None = None
        self._pages: dict[tuple[int, int], Page[Vet]] = {}

    def all_vets(self, load: Callable[[], list[Vet]]) -> list[Vet]:
        if self._all is None:
            logger.info("vet_cache_miss", key="all")
            self._all = load()
        return self._all

    def vet_page(self, page: int, size: int, load: Callable[[int, int], Page[Vet]]) -> Page[Vet]:
        key = (page, size)
        cached = self._pages.get(key)
        if cached is None:
            logger.info("vet_cache_miss", key="page", page=page, size=size)
            cached = load(page, size)
            # Only pages inside the result range are kept; the map stays bounded by the vet count.
            if cached.items or page == 1:
                self._pages[key] = cached
        return cached

    def clear(self) -> None:
        self._all = None
        self._pages.clear()
