"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON store and the
seed file but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import replace

from beadstock.domain.exceptions import (
    ConflictError,
    SeedNotFoundError,
    StoreUnavailableError,
)
from beadstock.domain.model.inventory import InventoryItem
from beadstock.domain.repository.inventory_repository import InventoryRepository
from beadstock.domain.repository.seed_source import SeedSource


class FakeInventoryRepository(InventoryRepository):
    """Dict-backed store.  Set ``available = False`` to simulate an outage."""

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._store: dict[str, InventoryItem] = {}
        self._lock = threading.Lock()
        self.available = True
        for item in items or []:
            self._store[item.id] = item

    def ping(self) -> None:
        self._check()

    def count(self) -> int:
        self._check()
        return len(self._store)

    def list_all(self) -> list[InventoryItem]:
        self._check()
        return [replace(item) for item in self._store.values()]

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        self._check()
        item = self._store.get(item_id)
        return replace(item) if item is not None else None

    def add(self, item: InventoryItem) -> None:
        self._check()
        with self._lock:
            if any(existing.code == item.code for existing in self._store.values()):
                raise ConflictError(f"Code already exists: '{item.code}'")
            self._store[item.id] = replace(item)

    def modify(
        self, item_id: str, mutate: Callable[[InventoryItem], None]
    ) -> InventoryItem | None:
        self._check()
        with self._lock:
            current = self._store.get(item_id)
            if current is None:
                return None
            updated = replace(current)
            mutate(updated)
            self._store[item_id] = updated
            return replace(updated)

    def remove(self, item_id: str) -> InventoryItem | None:
        self._check()
        with self._lock:
            return self._store.pop(item_id, None)

    def clear(self) -> int:
        self._check()
        with self._lock:
            removed = len(self._store)
            self._store.clear()
            return removed

    def _check(self) -> None:
        if not self.available:
            raise StoreUnavailableError("fake store is down")


class FakeSeedSource(SeedSource):
    """Seed codes from a list; ``None`` behaves like a missing seed file."""

    def __init__(self, codes: list[str] | None) -> None:
        self._codes = codes

    def codes(self) -> list[str]:
        if self._codes is None:
            raise SeedNotFoundError("no seed asset")
        return list(self._codes)
