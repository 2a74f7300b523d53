"""``circulation items``: add catalog items and show their status."""

from __future__ import annotations

import click

from circulation.entrypoints.api.schemas import ItemResponse
from circulation.service_layer import commands
from circulation.service_layer.views import item_by_barcode

from .helpers import echo_json, load_container, run_command


@click.group()
def items() -> None:
    """Manage catalog items."""


@items.command()
@click.argument("barcode")
@click.argument("title")
@click.argument("catalog_number")
def add(barcode: str, title: str, catalog_number: str) -> None:
    """Add an item with BARCODE, TITLE and CATALOG_NUMBER to the catalog.

    New items are AVAILABLE.
    """
    view = run_command(
        commands.AddItem(barcode=barcode, title=title, catalog_number=catalog_number)
    )
    echo_json(ItemResponse.from_view(view))


@items.command()
@click.argument("barcode")
def show(barcode: str) -> None:
    """Show the item with BARCODE and its circulation status."""
    container = load_container()
    if (view := item_by_barcode(barcode, container.message_bus.uow)) is None:
        raise click.ClickException(f"Item with barcode {barcode} not found.")
    echo_json(ItemResponse.from_view(view))
