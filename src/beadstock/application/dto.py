"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from beadstock.domain.model.inventory import InventoryItem


@dataclass(frozen=True)
class InventoryItemDTO:
    """Output: one item as shown to the user."""

    id: str
    code: str
    quantity: int
    created_at: str  # ISO 8601, UTC
    updated_at: str


@dataclass(frozen=True)
class ExportRowDTO:
    code: str
    quantity: int


@dataclass(frozen=True)
class InventoryExportDTO:
    """Output: portable snapshot of code/quantity pairs."""

    rows: list[ExportRowDTO]
    exported_at: str
    records: int


@dataclass(frozen=True)
class StoreStatusDTO:
    state: str  # "connected" / "disconnected"
    records: int | None
    checked_at: str


def to_dto(item: InventoryItem) -> InventoryItemDTO:
    return InventoryItemDTO(
        id=item.id,
        code=item.code,
        quantity=item.quantity,
        created_at=item.created_at.isoformat(),
        updated_at=item.updated_at.isoformat(),
    )
