"""Application service: Add Item use case."""

from __future__ import annotations

from beadstock.application.dto import InventoryItemDTO, to_dto
from beadstock.domain.model.inventory import InventoryItem
from beadstock.domain.repository.inventory_repository import InventoryRepository


class AddItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, code: str, quantity: object = 0) -> InventoryItemDTO:
        """Create a new item.

        An empty code raises ValidationError, a taken code ConflictError.
        A negative or non-numeric quantity is stored as 0.
        """
        item = InventoryItem.create(code, quantity)
        self._inventory_repo.add(item)
        return to_dto(item)
