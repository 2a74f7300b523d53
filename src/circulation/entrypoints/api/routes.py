"""Borrowing routes: place holds, check out, add and inspect items.

The handlers are ``async def`` and call the synchronous message bus directly,
so requests are served one at a time on the event loop and never share the
unit of work across threads.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from circulation.service_layer import commands
from circulation.service_layer.errors import ItemNotFoundError
from circulation.service_layer.messagebus import MessageBus
from circulation.service_layer.views import item_by_barcode

from .schemas import (
    AddItemRequest,
    CheckoutRequest,
    CheckoutResponse,
    HoldResponse,
    ItemResponse,
    PlaceHoldRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/borrow", tags=["borrow"])


def get_bus(request: Request) -> MessageBus:
    """Return the message bus the app was created with."""
    return request.app.state.bus


@router.post("/holds", response_model=HoldResponse)
async def place_hold(body: PlaceHoldRequest, bus: MessageBus = Depends(get_bus)):
    """Place a hold on an available item."""
    view = bus.handle(
        commands.PlaceHold(barcode=body.barcode, patron_id=str(body.patron_id))
    )
    return HoldResponse.from_view(view)


@router.post("/holds/{hold_id}/checkout", response_model=CheckoutResponse)
async def checkout(
    hold_id: UUID, body: CheckoutRequest, bus: MessageBus = Depends(get_bus)
):
    """Check out the item held by a hold."""
    view = bus.handle(
        commands.Checkout(hold_id=str(hold_id), patron_id=str(body.patron_id))
    )
    return CheckoutResponse.from_view(view)


@router.post(
    "/items", response_model=ItemResponse, status_code=status.HTTP_201_CREATED
)
async def add_item(body: AddItemRequest, bus: MessageBus = Depends(get_bus)):
    """Add an item to the catalog."""
    view = bus.handle(
        commands.AddItem(
            barcode=body.barcode, title=body.title, catalog_number=body.catalog_number
        )
    )
    return ItemResponse.from_view(view)


@router.get("/items/{barcode}", response_model=ItemResponse)
async def get_item(barcode: str, bus: MessageBus = Depends(get_bus)):
    """Show an item and its circulation status."""
    if (view := item_by_barcode(barcode, bus.uow)) is None:
        raise ItemNotFoundError(barcode)
    return ItemResponse.from_view(view)
