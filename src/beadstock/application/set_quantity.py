"""Application service: Set Quantity use case."""

from __future__ import annotations

from beadstock.application.dto import InventoryItemDTO, to_dto
from beadstock.domain.exceptions import EntityNotFoundError, ValidationError
from beadstock.domain.repository.inventory_repository import InventoryRepository


class SetQuantityHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: str, quantity: object) -> InventoryItemDTO:
        """Overwrite the stock level of an item."""
        if quantity is None:
            raise ValidationError("Quantity is required")

        item = self._inventory_repo.modify(
            item_id, lambda item: item.set_quantity(quantity)
        )
        if item is None:
            raise EntityNotFoundError(f"Inventory item not found: '{item_id}'")
        return to_dto(item)
