"""Module defining Commands."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddItem(Command):
    """Command to add a new item to the catalog."""

    barcode: str
    title: str
    catalog_number: str


@dataclass(frozen=True)
class PlaceHold(Command):
    """Command for a patron to place a hold on an available item."""

    barcode: str
    patron_id: str
    date_of_hold: date = field(default_factory=date.today)


@dataclass(frozen=True)
class Checkout(Command):
    """Command for a patron to check out the item they hold."""

    hold_id: str
    patron_id: str
    date_of_checkout: date = field(default_factory=date.today)
