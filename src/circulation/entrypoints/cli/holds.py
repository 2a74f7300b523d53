"""``circulation holds``: place holds and check out held items.

Results are printed as JSON on stdout with the same keys the HTTP API uses,
e.g. ``{"id": ..., "bookBarcode": ..., "patronId": ..., "dateOfHold": ...}``.
"""

from __future__ import annotations

from datetime import datetime

import click

from circulation.entrypoints.api.schemas import CheckoutResponse, HoldResponse
from circulation.service_layer import commands

from .helpers import echo_json, run_command

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _date_kwargs(name: str, value: datetime | None) -> dict:
    # Leave the command's own default (today) in place when no date is given.
    return {} if value is None else {name: value.date()}


@click.group()
def holds() -> None:
    """Place holds and check out held items."""


@holds.command()
@click.argument("barcode")
@click.argument("patron_id", type=click.UUID)
@click.option(
    "--date",
    "date_of_hold",
    type=ISO_DATE,
    default=None,
    help="Date of the hold (YYYY-MM-DD). Defaults to today.",
)
def place(barcode: str, patron_id, date_of_hold: datetime | None) -> None:
    """Place a hold on the available item BARCODE for PATRON_ID."""
    view = run_command(
        commands.PlaceHold(
            barcode=barcode,
            patron_id=str(patron_id),
            **_date_kwargs("date_of_hold", date_of_hold),
        )
    )
    echo_json(HoldResponse.from_view(view))


@holds.command()
@click.argument("hold_id", type=click.UUID)
@click.argument("patron_id", type=click.UUID)
@click.option(
    "--date",
    "date_of_checkout",
    type=ISO_DATE,
    default=None,
    help="Date of the checkout (YYYY-MM-DD). Defaults to today.",
)
def checkout(hold_id, patron_id, date_of_checkout: datetime | None) -> None:
    """Check out the item held by HOLD_ID on behalf of PATRON_ID."""
    view = run_command(
        commands.Checkout(
            hold_id=str(hold_id),
            patron_id=str(patron_id),
            **_date_kwargs("date_of_checkout", date_of_checkout),
        )
    )
    echo_json(CheckoutResponse.from_view(view))
