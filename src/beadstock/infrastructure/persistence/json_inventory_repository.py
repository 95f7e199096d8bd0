"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from beadstock.domain.exceptions import ConflictError, StoreUnavailableError
from beadstock.domain.model.inventory import InventoryItem
from beadstock.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

_FIELDS = frozenset({"id", "code", "quantity", "created_at", "updated_at"})


class JsonInventoryRepository(InventoryRepository):
    """One JSON document per item, kept as a list in a single file.

    A re-entrant lock serialises every load/mutate/persist cycle, so
    ``add`` and ``modify`` are atomic within the process.  Waiting for the
    lock is bounded by ``timeout`` seconds.
    """

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file_path = file_path
        self._timeout = timeout
        self._lock = threading.RLock()

    # --- InventoryRepository interface ----------------------------------------

    def ping(self) -> None:
        with self._locked():
            self._ensure_file()
            self._load_raw()

    def count(self) -> int:
        with self._locked():
            return len(self._load_raw())

    def list_all(self) -> list[InventoryItem]:
        with self._locked():
            return [self._to_domain(raw) for raw in self._load_raw()]

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        with self._locked():
            for raw in self._load_raw():
                if raw["id"] == item_id:
                    return self._to_domain(raw)
        return None

    def add(self, item: InventoryItem) -> None:
        with self._locked():
            records = self._load_raw()
            if any(raw["code"] == item.code for raw in records):
                raise ConflictError(f"Code already exists: '{item.code}'")
            records.append(self._to_raw(item))
            self._persist_raw(records)
        logger.debug("Inserted %s (%s)", item.code, item.id)

    def modify(
        self, item_id: str, mutate: Callable[[InventoryItem], None]
    ) -> InventoryItem | None:
        with self._locked():
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == item_id:
                    item = self._to_domain(raw)
                    mutate(item)
                    records[i] = self._to_raw(item)
                    self._persist_raw(records)
                    logger.debug("Updated %s -> %d", item.code, item.quantity)
                    return item
        return None

    def remove(self, item_id: str) -> InventoryItem | None:
        with self._locked():
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == item_id:
                    del records[i]
                    self._persist_raw(records)
                    logger.debug("Removed %s", raw["code"])
                    return self._to_domain(raw)
        return None

    def clear(self) -> int:
        with self._locked():
            removed = len(self._load_raw())
            self._persist_raw([])
        return removed

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "code": item.code,
            "quantity": item.quantity,
            "created_at": item.created_at.isoformat(),
            "updated_at": item.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        try:
            quantity = raw["quantity"]
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValueError(f"bad quantity {quantity!r}")
            if quantity < 0:
                raise ValueError(f"bad quantity {quantity!r}")
            return InventoryItem(
                id=raw["id"],
                code=raw["code"],
                quantity=quantity,
                created_at=datetime.fromisoformat(raw["created_at"]),
                updated_at=datetime.fromisoformat(raw["updated_at"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise StoreUnavailableError(f"Malformed inventory record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._timeout):
            raise StoreUnavailableError(
                f"Timed out after {self._timeout}s waiting for {self._file_path}"
            )
        try:
            yield
        finally:
            self._lock.release()

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(
                f"Cannot read inventory store {self._file_path}: {exc}"
            ) from exc
        if not isinstance(records, list):
            raise StoreUnavailableError(
                f"Inventory store {self._file_path} is not a JSON list"
            )
        for raw in records:
            if not isinstance(raw, dict) or not _FIELDS <= raw.keys():
                raise StoreUnavailableError(
                    f"Malformed record in inventory store {self._file_path}: {raw!r}"
                )
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot write inventory store {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot create inventory store {self._file_path}: {exc}"
            ) from exc
