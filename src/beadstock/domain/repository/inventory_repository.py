"""Abstract repository for the InventoryItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from beadstock.domain.model.inventory import InventoryItem


class InventoryReader(ABC):
    """Read-only view over a set of items."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every item, in no particular order."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return the item with this id, or None."""


class InventoryRepository(InventoryReader):
    """Backing store for inventory items.

    Every method raises ``StoreUnavailableError`` when the store cannot be
    reached.
    """

    @abstractmethod
    def ping(self) -> None:
        """Check connectivity within a bounded time."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored items."""

    @abstractmethod
    def add(self, item: InventoryItem) -> None:
        """Insert a new item.

        The uniqueness check and the insert happen as one step; raises
        ConflictError if the code is taken.
        """

    @abstractmethod
    def modify(
        self, item_id: str, mutate: Callable[[InventoryItem], None]
    ) -> InventoryItem | None:
        """Apply ``mutate`` to the stored item and persist it atomically.

        Returns the updated item, or None if the id is unknown.  If
        ``mutate`` raises, nothing is written.
        """

    @abstractmethod
    def remove(self, item_id: str) -> InventoryItem | None:
        """Delete and return the item, or None if the id is unknown."""

    @abstractmethod
    def clear(self) -> int:
        """Delete every item; return how many were removed."""
