"""Request and response bodies for the borrowing API.

Field names are snake_case in Python and camelCase on the wire. Patron and
hold identifiers are validated as UUIDs on the way in and rendered in their
canonical lowercase form on the way out.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from circulation.service_layer.views import CheckoutView, HoldView, ItemView


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
#                               Requests
# ============================================================================


class PlaceHoldRequest(CamelModel):
    """Body of ``POST /borrow/holds``."""

    barcode: str = Field(min_length=1, max_length=64)
    patron_id: UUID


class CheckoutRequest(CamelModel):
    """Body of ``POST /borrow/holds/{hold_id}/checkout``."""

    patron_id: UUID


class AddItemRequest(CamelModel):
    """Body of ``POST /borrow/items``."""

    barcode: str = Field(min_length=1, max_length=64)
    title: str = Field(min_length=1)
    catalog_number: str = Field(min_length=1)


# ============================================================================
#                               Responses
# ============================================================================


class HoldResponse(CamelModel):
    """A placed hold."""

    id: str
    book_barcode: str
    patron_id: str
    date_of_hold: date

    @classmethod
    def from_view(cls, view: HoldView) -> HoldResponse:
        return cls(
            id=view.id,
            book_barcode=view.book_barcode,
            patron_id=view.patron_id,
            date_of_hold=view.date_of_hold,
        )


class CheckoutResponse(CamelModel):
    """A completed checkout."""

    hold_id: str
    patron_id: str
    date_of_checkout: date

    @classmethod
    def from_view(cls, view: CheckoutView) -> CheckoutResponse:
        return cls(
            hold_id=view.hold_id,
            patron_id=view.patron_id,
            date_of_checkout=view.date_of_checkout,
        )


class ItemResponse(CamelModel):
    """A catalog item and its circulation status."""

    id: str
    barcode: str
    title: str
    catalog_number: str
    status: str

    @classmethod
    def from_view(cls, view: ItemView) -> ItemResponse:
        return cls(
            id=view.id,
            barcode=view.barcode,
            title=view.title,
            catalog_number=view.catalog_number,
            status=view.status,
        )
