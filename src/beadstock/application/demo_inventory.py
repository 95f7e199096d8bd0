"""Demo inventory served while the persistent store is unreachable.

The set is rebuilt from the seed codes on every call and never written
anywhere.  Quantities are pseudo-random but stable per code, so repeated
reads agree with each other.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone

from beadstock.domain.exceptions import SeedError
from beadstock.domain.model.inventory import InventoryItem
from beadstock.domain.repository.inventory_repository import InventoryReader
from beadstock.domain.repository.seed_source import SeedSource

BOOTSTRAP_CODE = "A1"
BOOTSTRAP_QUANTITY = 10
DEMO_LIMIT = 50
MAX_DEMO_QUANTITY = 20

# Used when the seed asset is missing or unreadable.
SAMPLE_STOCK: tuple[tuple[str, int], ...] = (
    ("A1", 10),
    ("A2", 5),
    ("B1", 0),
    ("B2", 3),
    ("C1", 8),
)


class DemoInventoryGenerator(InventoryReader):

    def __init__(self, seed_source: SeedSource, limit: int = DEMO_LIMIT) -> None:
        self._seed_source = seed_source
        self._limit = limit

    def generate(self) -> list[InventoryItem]:
        """Return the demo items ordered by code."""
        try:
            codes = list(dict.fromkeys(self._seed_source.codes()))[: self._limit]
            stock = [(code, self._quantity_for(code)) for code in codes]
        except SeedError:
            stock = list(SAMPLE_STOCK)

        now = datetime.now(timezone.utc)
        items = [
            InventoryItem(
                id=f"demo_{n}",
                code=code,
                quantity=quantity,
                created_at=now,
                updated_at=now,
            )
            for n, (code, quantity) in enumerate(stock, start=1)
        ]
        items.sort(key=lambda i: i.code)
        return items

    # --- InventoryReader interface --------------------------------------------

    def list_all(self) -> list[InventoryItem]:
        return self.generate()

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        for item in self.generate():
            if item.id == item_id:
                return item
        return None

    @staticmethod
    def _quantity_for(code: str) -> int:
        if code == BOOTSTRAP_CODE:
            return BOOTSTRAP_QUANTITY
        return random.Random(code).randint(0, MAX_DEMO_QUANTITY)
