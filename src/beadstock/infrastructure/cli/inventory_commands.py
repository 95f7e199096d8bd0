"""CLI commands for inventory items."""

from __future__ import annotations

import click

from beadstock.application.availability import Sourced
from beadstock.domain.exceptions import DomainException
from beadstock.domain.model.inventory import AdjustDirection
from beadstock.infrastructure.bootstrap import availability_controller


def _echo_source(result: Sourced) -> None:
    click.echo(f"(source: {result.source.value})")


def _display_items(items) -> None:
    """Shared formatting for item tables."""
    click.echo(f"{'Code':<10} {'Quantity':>8}  {'Updated':<32} {'ID'}")
    click.echo("-" * 86)
    for item in items:
        click.echo(
            f"{item.code:<10} {item.quantity:>8}  {item.updated_at:<32} {item.id}"
        )


@click.command("list")
@click.option("--category", default=None, help="Only codes starting with this prefix.")
def inventory_list(category: str | None) -> None:
    """List inventory items ordered by code."""
    controller = availability_controller()
    if category is None:
        result = controller.list_items()
    else:
        result = controller.items_by_category(category)

    _echo_source(result)
    if not result.data:
        click.echo("No inventory records found.")
        return
    _display_items(result.data)


@click.command("show")
@click.argument("item_id")
def inventory_show(item_id: str) -> None:
    """Show a single inventory item."""
    try:
        result = availability_controller().get_item(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_source(result)
    item = result.data
    click.echo(f"ID:       {item.id}")
    click.echo(f"Code:     {item.code}")
    click.echo(f"Quantity: {item.quantity}")
    click.echo(f"Created:  {item.created_at}")
    click.echo(f"Updated:  {item.updated_at}")


@click.command("add")
@click.argument("code")
@click.option("--quantity", default="0", help="Initial quantity (defaults to 0).")
def inventory_add(code: str, quantity: str) -> None:
    """Add a new code to the inventory."""
    try:
        item = availability_controller().create_item(code, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {item.code} (quantity={item.quantity}, id={item.id})")


@click.command("set")
@click.argument("item_id")
@click.option("--quantity", required=True, type=int, help="New quantity in stock.")
def inventory_set(item_id: str, quantity: int) -> None:
    """Set the quantity of an item."""
    try:
        item = availability_controller().set_quantity(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{item.code} set to {item.quantity}")


@click.command("adjust")
@click.argument("item_id")
@click.option(
    "--direction",
    required=True,
    type=click.Choice([d.value for d in AdjustDirection]),
    help="Whether to add to or take from stock.",
)
@click.option("--amount", required=True, type=int, help="How many beads.")
def inventory_adjust(item_id: str, direction: str, amount: int) -> None:
    """Increase or decrease the quantity of an item."""
    try:
        item = availability_controller().adjust(item_id, direction, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{item.code} {direction}d by {amount} -> {item.quantity}")


@click.command("delete")
@click.argument("item_id")
def inventory_delete(item_id: str) -> None:
    """Delete an inventory item."""
    try:
        item = availability_controller().delete_item(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Deleted {item.code} ({item.id})")


@click.command("categories")
def inventory_categories() -> None:
    """List the code prefixes in use."""
    result = availability_controller().categories()
    _echo_source(result)
    for category in sorted(result.data):
        click.echo(category)


@click.command("export")
def inventory_export() -> None:
    """Print every code and quantity as tab-separated lines."""
    result = availability_controller().export()
    _echo_source(result)
    for row in result.data.rows:
        click.echo(f"{row.code}\t{row.quantity}")
    click.echo(f"{result.data.records} record(s) exported at {result.data.exported_at}")
