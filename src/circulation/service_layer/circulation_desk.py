"""The circulation desk: holds, checkouts and the item reactions they trigger.

Commands (`place_hold`, `checkout`, `add_item`) each run in their own unit of
work. The hold transitions publish events; the desk subscribes to those
events and reacts by transitioning the matching item (`handle`). Reactions
run synchronously inside the command's unit of work, so the command commits
only once the item has been updated, and a failed reaction leaves no writes
behind.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from circulation.domain.aggregates import Hold, Item
from circulation.domain.events import BookCheckedOut, DomainEvent, HoldPlaced

from .errors import HoldNotFoundError, ItemNotAvailableError, ItemNotOnHoldError
from .views import CheckoutView, HoldView, ItemView, item_by_barcode

if TYPE_CHECKING:
    from circulation.interfaces.event_publisher import HoldEventPublisher
    from circulation.interfaces.id_generator import IdGenerator
    from circulation.interfaces.unit_of_work import AbstractUnitOfWork

    from . import commands

logger = logging.getLogger(__name__)


class CirculationDesk:
    """Orchestrates hold placement and checkout across items and holds.

    Args:
        uow: Unit of work giving access to the item and hold repositories.
        publisher: Publisher used to announce hold events. The desk expects
            to be subscribed to them (see `circulation.bootstrap`).
        id_generator: Generator for new item and hold IDs.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        publisher: HoldEventPublisher,
        id_generator: IdGenerator,
    ) -> None:
        self.uow = uow
        self.publisher = publisher
        self.id_generator = id_generator

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_hold(self, cmd: commands.PlaceHold) -> HoldView:
        """Place a hold on an available item.

        Raises:
            ItemNotAvailableError: If no AVAILABLE item has the barcode.
        """
        with self.uow:
            if self.uow.items.find_available_by_barcode(cmd.barcode) is None:
                logger.info(
                    "PlaceHold %s for patron %s: item not available",
                    cmd.barcode,
                    cmd.patron_id,
                )
                raise ItemNotAvailableError(cmd.barcode)

            hold = Hold.place_hold(
                aggregate_id=self.id_generator.new_id(),
                barcode=cmd.barcode,
                date_of_hold=cmd.date_of_hold,
                patron_id=cmd.patron_id,
            )
            hold = self.uow.holds.save(hold)
            hold = self.publisher.hold_placed(hold)
            self.uow.commit()

        logger.info(
            "Hold %s placed on %s for patron %s",
            hold.aggregate_id,
            hold.barcode,
            hold.patron_id,
        )
        return HoldView.from_hold(hold)

    def checkout(self, cmd: commands.Checkout) -> CheckoutView:
        """Check out the item held by a hold.

        Raises:
            HoldNotFoundError: If the hold does not exist.
            HoldOwnershipError: If the patron did not place the hold.
            HoldNotPlacedError: If the hold was already checked out.
        """
        with self.uow:
            if (hold := self.uow.holds.find_by_id(cmd.hold_id)) is None:
                logger.info("Checkout %s: hold not found", cmd.hold_id)
                raise HoldNotFoundError(cmd.hold_id)

            hold.checkout(cmd.date_of_checkout, cmd.patron_id)
            hold = self.uow.holds.save(hold)
            hold = self.publisher.book_checked_out(hold)
            self.uow.commit()

        logger.info(
            "Hold %s checked out by patron %s", hold.aggregate_id, hold.patron_id
        )
        return CheckoutView.from_hold(hold)

    def add_item(self, cmd: commands.AddItem) -> ItemView:
        """Add a new item to the catalog.

        Raises:
            DuplicateBarcodeError: If the barcode is already in use.
        """
        item = Item.add_item(
            aggregate_id=self.id_generator.new_id(),
            barcode=cmd.barcode,
            title=cmd.title,
            catalog_number=cmd.catalog_number,
        )
        with self.uow:
            item = self.uow.items.save(item)
            self.uow.commit()

        logger.info("Item %s added as %s", item.barcode, item.aggregate_id)
        return ItemView.from_item(item)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_item(self, barcode: str) -> ItemView | None:
        """Look up an item by barcode, whatever its status."""
        return item_by_barcode(barcode, self.uow)

    # ------------------------------------------------------------------
    # Event reactions
    # ------------------------------------------------------------------

    def handle(self, event: DomainEvent) -> None:
        """React to a hold event by transitioning the matching item.

        Runs inside the unit of work of the command that raised the event and
        never commits on its own.

        Raises:
            ItemNotAvailableError: If a hold was placed on an item that is no
                longer available.
            ItemNotOnHoldError: If a checked out item is not on hold.
            ValueError: If the event type is not one the desk reacts to.
        """
        logger.debug("Handling event %s", event)
        match event:
            case HoldPlaced():
                self._on_hold_placed(event)
            case BookCheckedOut():
                self._on_book_checked_out(event)
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")

    def _on_hold_placed(self, event: HoldPlaced) -> None:
        if (item := self.uow.items.find_available_by_barcode(event.barcode)) is None:
            raise ItemNotAvailableError(event.barcode)
        self.uow.items.save(item.mark_on_hold())
        logger.debug("Item %s marked on hold by %s", event.barcode, event.hold_id)

    def _on_book_checked_out(self, event: BookCheckedOut) -> None:
        if (item := self.uow.items.find_on_hold_by_barcode(event.barcode)) is None:
            raise ItemNotOnHoldError(event.barcode)
        self.uow.items.save(item.mark_issued())
        logger.debug("Item %s issued for %s", event.barcode, event.hold_id)
