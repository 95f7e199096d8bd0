"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from beadstock.application.availability import AvailabilityController
from beadstock.infrastructure.config import Settings
from beadstock.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from beadstock.infrastructure.seed.seed_file import SeedFile


def inventory_repository(settings: Settings) -> JsonInventoryRepository:
    return JsonInventoryRepository(settings.store_file, timeout=settings.store_timeout)


def seed_source(settings: Settings) -> SeedFile:
    return SeedFile(settings.seed_file)


def availability_controller(settings: Settings | None = None) -> AvailabilityController:
    """Build a controller and attempt the start-up connection."""
    settings = settings or Settings.from_env()
    controller = AvailabilityController(
        inventory_repo=inventory_repository(settings),
        seed_source=seed_source(settings),
    )
    controller.connect()
    return controller
