"""Application service: Adjust Quantity use case.

The only relative update: the new quantity is computed from the stored
one, so the change is applied inside ``InventoryRepository.modify`` where
the store serialises concurrent adjustments of the same item.
"""

from __future__ import annotations

from beadstock.application.dto import InventoryItemDTO, to_dto
from beadstock.domain.exceptions import EntityNotFoundError
from beadstock.domain.model.inventory import AdjustDirection, require_positive
from beadstock.domain.repository.inventory_repository import InventoryRepository


class AdjustQuantityHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self, item_id: str, direction: AdjustDirection | str, amount: object
    ) -> InventoryItemDTO:
        """Increase or decrease stock by ``amount``.

        Raises ValidationError for a bad direction or non-positive amount,
        EntityNotFoundError for an unknown id and InsufficientStockError
        when a decrease would go below zero.
        """
        parsed = AdjustDirection.parse(direction)
        require_positive(amount)

        item = self._inventory_repo.modify(
            item_id, lambda item: item.adjust(parsed, amount)
        )
        if item is None:
            raise EntityNotFoundError(f"Inventory item not found: '{item_id}'")
        return to_dto(item)
