"""Service layer handlers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from . import commands

if TYPE_CHECKING:
    from .circulation_desk import CirculationDesk
    from .views import CheckoutView, HoldView, ItemView


def add_item(cmd: commands.AddItem, desk: CirculationDesk) -> ItemView:
    """Add an item to the catalog."""
    return desk.add_item(cmd)


def place_hold(cmd: commands.PlaceHold, desk: CirculationDesk) -> HoldView:
    """Place a hold on an available item."""
    return desk.place_hold(cmd)


def checkout(cmd: commands.Checkout, desk: CirculationDesk) -> CheckoutView:
    """Check out a held item."""
    return desk.checkout(cmd)


# ============================================================================
#                       Handler Registry
# ============================================================================


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.AddItem: add_item,
    commands.PlaceHold: place_hold,
    commands.Checkout: checkout,
}
