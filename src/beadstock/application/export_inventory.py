"""Application service: Export Inventory use case (query)."""

from __future__ import annotations

from datetime import datetime, timezone

from beadstock.application.dto import ExportRowDTO, InventoryExportDTO
from beadstock.domain.repository.inventory_repository import InventoryReader


class ExportInventoryHandler:

    def __init__(self, inventory_reader: InventoryReader) -> None:
        self._inventory_reader = inventory_reader

    def handle(self) -> InventoryExportDTO:
        """Snapshot every code with its quantity, ordered by code."""
        items = sorted(self._inventory_reader.list_all(), key=lambda i: i.code)
        rows = [ExportRowDTO(code=item.code, quantity=item.quantity) for item in items]
        return InventoryExportDTO(
            rows=rows,
            exported_at=datetime.now(timezone.utc).isoformat(),
            records=len(rows),
        )
