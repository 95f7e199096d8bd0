"""Availability controller: routes every request to the live store or demo data.

The controller is the only entry point the outer layer (CLI) talks to.
It tracks whether the persistent store is reachable:

  DISCONNECTED --connect() ok--> CONNECTED
  CONNECTED --store error / mark_unavailable()--> DISCONNECTED

Reads never fail because of the store: while disconnected they are answered
from the demo generator, and a live read that fails mid-flight is retried
once against the demo set.  Each read result carries the tier that produced
it.  Writes require a connected store.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, TypeVar

from beadstock.application.add_item import AddItemHandler
from beadstock.application.adjust_quantity import AdjustQuantityHandler
from beadstock.application.delete_item import DeleteItemHandler
from beadstock.application.demo_inventory import DemoInventoryGenerator
from beadstock.application.dto import (
    InventoryExportDTO,
    InventoryItemDTO,
    StoreStatusDTO,
)
from beadstock.application.export_inventory import ExportInventoryHandler
from beadstock.application.import_seed import ImportSeedHandler, ResetInventoryHandler
from beadstock.application.set_quantity import SetQuantityHandler
from beadstock.application.show_inventory import ShowInventoryHandler
from beadstock.domain.exceptions import (
    SeedNotFoundError,
    SeedUnreadableError,
    StoreUnavailableError,
)
from beadstock.domain.model.inventory import AdjustDirection
from beadstock.domain.repository.inventory_repository import (
    InventoryReader,
    InventoryRepository,
)
from beadstock.domain.repository.seed_source import SeedSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreState(Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class DataSource(Enum):
    """Which tier answered a read."""

    LIVE = "live"
    DEMO = "demo"
    DEMO_ON_ERROR = "demo-on-error"


@dataclass(frozen=True)
class Sourced(Generic[T]):
    data: T
    source: DataSource


class AvailabilityController:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        seed_source: SeedSource,
        demo: InventoryReader | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._seed_source = seed_source
        self._demo = demo if demo is not None else DemoInventoryGenerator(seed_source)
        self._state = StoreState.DISCONNECTED
        self._state_lock = threading.Lock()

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state is StoreState.CONNECTED

    # --- State transitions ----------------------------------------------------

    def connect(self) -> bool:
        """Check the store is reachable; on success seed it if empty.

        Returns True when the store ended up connected.  There is no
        automatic retry; call again to reconnect.
        """
        try:
            self._inventory_repo.ping()
            self._set_state(StoreState.CONNECTED)
            if self._inventory_repo.count() == 0:
                self._seed_empty_store()
        except StoreUnavailableError as exc:
            logger.warning("Inventory store unavailable: %s", exc)
            self._set_state(StoreState.DISCONNECTED)
            return False
        return True

    def mark_unavailable(self, reason: str = "") -> None:
        if self.connected:
            logger.warning("Inventory store lost: %s", reason or "unknown reason")
        self._set_state(StoreState.DISCONNECTED)

    def _set_state(self, state: StoreState) -> None:
        with self._state_lock:
            if self._state is state:
                return
            self._state = state
        logger.info("Inventory store is now %s", state.value)

    def _seed_empty_store(self) -> None:
        try:
            inserted = ImportSeedHandler(self._inventory_repo, self._seed_source).handle()
        except SeedNotFoundError:
            logger.info("Store is empty and there is no seed asset; skipping import")
            return
        except SeedUnreadableError as exc:
            logger.warning("Store is empty and the seed asset is unreadable: %s", exc)
            return
        logger.info("Seeded empty store with %d codes", inserted)

    # --- Reads ----------------------------------------------------------------

    def list_items(self) -> Sourced[list[InventoryItemDTO]]:
        return self._read(lambda reader: ShowInventoryHandler(reader).list_items())

    def get_item(self, item_id: str) -> Sourced[InventoryItemDTO]:
        return self._read(lambda reader: ShowInventoryHandler(reader).get_item(item_id))

    def categories(self) -> Sourced[set[str]]:
        return self._read(lambda reader: ShowInventoryHandler(reader).categories())

    def items_by_category(self, prefix: str) -> Sourced[list[InventoryItemDTO]]:
        return self._read(
            lambda reader: ShowInventoryHandler(reader).items_by_category(prefix)
        )

    def export(self) -> Sourced[InventoryExportDTO]:
        return self._read(lambda reader: ExportInventoryHandler(reader).handle())

    def status(self) -> StoreStatusDTO:
        records = None
        if self.connected:
            try:
                records = self._inventory_repo.count()
            except StoreUnavailableError as exc:
                self.mark_unavailable(str(exc))
        return StoreStatusDTO(
            state=self._state.value,
            records=records,
            checked_at=datetime.now(timezone.utc).isoformat(),
        )

    def _read(self, query: Callable[[InventoryReader], T]) -> Sourced[T]:
        if not self.connected:
            return Sourced(query(self._demo), DataSource.DEMO)
        try:
            return Sourced(query(self._inventory_repo), DataSource.LIVE)
        except StoreUnavailableError as exc:
            self.mark_unavailable(str(exc))
            logger.warning("Live read failed, serving demo data instead")
            return Sourced(query(self._demo), DataSource.DEMO_ON_ERROR)

    # --- Writes ---------------------------------------------------------------

    def create_item(self, code: str, quantity: object = 0) -> InventoryItemDTO:
        return self._write(lambda repo: AddItemHandler(repo).handle(code, quantity))

    def set_quantity(self, item_id: str, quantity: object) -> InventoryItemDTO:
        return self._write(
            lambda repo: SetQuantityHandler(repo).handle(item_id, quantity)
        )

    def adjust(
        self, item_id: str, direction: AdjustDirection | str, amount: object
    ) -> InventoryItemDTO:
        return self._write(
            lambda repo: AdjustQuantityHandler(repo).handle(item_id, direction, amount)
        )

    def delete_item(self, item_id: str) -> InventoryItemDTO:
        return self._write(lambda repo: DeleteItemHandler(repo).handle(item_id))

    def import_seed(self) -> int:
        return self._write(
            lambda repo: ImportSeedHandler(repo, self._seed_source).handle()
        )

    def reset(self) -> int:
        return self._write(
            lambda repo: ResetInventoryHandler(repo, self._seed_source).handle()
        )

    def _write(self, command: Callable[[InventoryRepository], T]) -> T:
        if not self.connected:
            raise StoreUnavailableError("Inventory store is not connected")
        try:
            return command(self._inventory_repo)
        except StoreUnavailableError as exc:
            self.mark_unavailable(str(exc))
            raise
