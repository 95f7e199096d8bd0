"""CLI commands for the backing store: status and seeding."""

from __future__ import annotations

import click

from beadstock.domain.exceptions import DomainException
from beadstock.infrastructure.bootstrap import availability_controller


@click.command("status")
def store_status() -> None:
    """Show whether the inventory store is reachable."""
    status = availability_controller().status()
    click.echo(f"Store:   {status.state}")
    if status.records is not None:
        click.echo(f"Records: {status.records}")
    click.echo(f"Checked: {status.checked_at}")


@click.command("import")
def store_import() -> None:
    """Add every seed code that is not stored yet."""
    try:
        inserted = availability_controller().import_seed()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Imported {inserted} new code(s)")


@click.command("reset")
@click.confirmation_option(prompt="Delete every item and re-seed from the seed file?")
def store_reset() -> None:
    """Clear the store and re-import the seed codes."""
    try:
        records = availability_controller().reset()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory reset: {records} record(s)")
