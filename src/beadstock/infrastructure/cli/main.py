import click

from beadstock.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_adjust,
    inventory_categories,
    inventory_delete,
    inventory_export,
    inventory_list,
    inventory_set,
    inventory_show,
)
from beadstock.infrastructure.cli.store_commands import (
    store_import,
    store_reset,
    store_status,
)
from beadstock.infrastructure.config import Settings
from beadstock.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """beadstock — bead colour inventory"""
    try:
        settings = Settings.from_env()
        configure_logging("DEBUG" if verbose else settings.log_level)
    except ValueError as exc:
        raise click.ClickException(str(exc))


@cli.group()
def inventory() -> None:
    """Manage inventory items."""


@cli.group()
def store() -> None:
    """Inspect and seed the inventory store."""


# Register subcommands
inventory.add_command(inventory_add)
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_categories)
inventory.add_command(inventory_delete)
inventory.add_command(inventory_export)
inventory.add_command(inventory_list)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
store.add_command(store_import)
store.add_command(store_reset)
store.add_command(store_status)
