"""Application service: Delete Item use case."""

from __future__ import annotations

from beadstock.application.dto import InventoryItemDTO, to_dto
from beadstock.domain.exceptions import EntityNotFoundError
from beadstock.domain.repository.inventory_repository import InventoryRepository


class DeleteItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: str) -> InventoryItemDTO:
        """Remove an item and return what was removed."""
        item = self._inventory_repo.remove(item_id)
        if item is None:
            raise EntityNotFoundError(f"Inventory item not found: '{item_id}'")
        return to_dto(item)
