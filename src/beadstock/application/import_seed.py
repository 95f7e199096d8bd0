"""Application services: Import Seed and Reset Inventory use cases.

Seeded items always start at quantity 0.
"""

from __future__ import annotations

import logging

from beadstock.domain.exceptions import ConflictError
from beadstock.domain.model.inventory import InventoryItem
from beadstock.domain.repository.inventory_repository import InventoryRepository
from beadstock.domain.repository.seed_source import SeedSource

logger = logging.getLogger(__name__)


class ImportSeedHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        seed_source: SeedSource,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._seed_source = seed_source

    def handle(self) -> int:
        """Insert every seed code that is not stored yet.

        Returns the number of items inserted.  Raises SeedNotFoundError if
        the seed asset is missing.
        """
        inserted = 0
        for code in dict.fromkeys(self._seed_source.codes()):
            try:
                self._inventory_repo.add(InventoryItem.create(code))
            except ConflictError:
                logger.debug("Seed code %s already stored", code)
                continue
            inserted += 1
        logger.info("Imported %d seed codes", inserted)
        return inserted


class ResetInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        seed_source: SeedSource,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._seed_source = seed_source

    def handle(self) -> int:
        """Wipe the store and re-import the seed; return the new record count."""
        # Read the seed first so a missing asset leaves the store untouched.
        codes = self._seed_source.codes()
        removed = self._inventory_repo.clear()
        logger.info("Cleared %d items before re-seeding", removed)
        for code in dict.fromkeys(codes):
            self._inventory_repo.add(InventoryItem.create(code))
        return self._inventory_repo.count()
