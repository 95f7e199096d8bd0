"""Application service: Show Inventory use cases (queries)."""

from __future__ import annotations

from beadstock.application.dto import InventoryItemDTO, to_dto
from beadstock.domain.exceptions import EntityNotFoundError
from beadstock.domain.model.category import category_index, in_category
from beadstock.domain.repository.inventory_repository import InventoryReader


class ShowInventoryHandler:
    """Read-side queries over any InventoryReader (live store or demo set)."""

    def __init__(self, inventory_reader: InventoryReader) -> None:
        self._inventory_reader = inventory_reader

    def list_items(self) -> list[InventoryItemDTO]:
        items = sorted(self._inventory_reader.list_all(), key=lambda i: i.code)
        return [to_dto(item) for item in items]

    def get_item(self, item_id: str) -> InventoryItemDTO:
        item = self._inventory_reader.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Inventory item not found: '{item_id}'")
        return to_dto(item)

    def categories(self) -> set[str]:
        return category_index(self._inventory_reader.list_all())

    def items_by_category(self, prefix: str) -> list[InventoryItemDTO]:
        items = [
            item
            for item in self._inventory_reader.list_all()
            if in_category(item, prefix)
        ]
        items.sort(key=lambda i: i.code)
        return [to_dto(item) for item in items]
