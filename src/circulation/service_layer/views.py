"""Read models returned by the circulation desk."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from circulation.domain.aggregates import Hold, Item
    from circulation.interfaces.unit_of_work import AbstractUnitOfWork


@dataclass(frozen=True, slots=True)
class HoldView:
    """A placed hold, as reported back to the patron."""

    id: str
    book_barcode: str
    patron_id: str
    date_of_hold: date

    @classmethod
    def from_hold(cls, hold: Hold) -> HoldView:
        """Project a hold onto its view."""
        assert hold.date_of_hold is not None
        return cls(
            id=hold.aggregate_id,
            book_barcode=hold.barcode,
            patron_id=hold.patron_id,
            date_of_hold=hold.date_of_hold,
        )


@dataclass(frozen=True, slots=True)
class CheckoutView:
    """A completed checkout."""

    hold_id: str
    patron_id: str
    date_of_checkout: date

    @classmethod
    def from_hold(cls, hold: Hold) -> CheckoutView:
        """Project a checked out hold onto its view."""
        assert hold.date_of_checkout is not None
        return cls(
            hold_id=hold.aggregate_id,
            patron_id=hold.patron_id,
            date_of_checkout=hold.date_of_checkout,
        )


@dataclass(frozen=True, slots=True)
class ItemView:
    """A catalog item and its current status."""

    id: str
    barcode: str
    title: str
    catalog_number: str
    status: str

    @classmethod
    def from_item(cls, item: Item) -> ItemView:
        """Project an item onto its view."""
        return cls(
            id=item.aggregate_id,
            barcode=item.barcode,
            title=item.title,
            catalog_number=item.catalog_number,
            status=item.status.value,
        )


def item_by_barcode(barcode: str, uow: AbstractUnitOfWork) -> ItemView | None:
    """Look up an item by barcode, whatever its status."""
    with uow:
        item = uow.items.get_by_barcode(barcode)
    return ItemView.from_item(item) if item is not None else None
