"""Item Aggregate"""

from enum import Enum

from circulation.domain.errors import ItemStatusError

from .base import Aggregate

# pylint: disable=too-many-arguments,
# pylint: disable=too-many-positional-arguments


class ItemStatus(str, Enum):
    """Lifecycle status of a catalog item."""

    AVAILABLE = "AVAILABLE"
    ON_HOLD = "ON_HOLD"
    ISSUED = "ISSUED"


class Item(Aggregate):
    """Aggregate root representing a lendable catalog item.

    Status only moves forward: AVAILABLE -> ON_HOLD -> ISSUED.
    """

    KIND = "Item"

    def __init__(self, aggregate_id: str, version: int = 0) -> None:
        super().__init__(aggregate_id, version)
        self.barcode: str = ""
        self.title: str = ""
        self.catalog_number: str = ""
        self.status: ItemStatus = ItemStatus.AVAILABLE

    # --- Construction Paths ---

    @classmethod
    def add_item(
        cls, aggregate_id: str, barcode: str, title: str, catalog_number: str
    ) -> "Item":
        """Add a new item to the catalog; it starts out available."""
        item = cls(aggregate_id)
        item.barcode = barcode
        item.title = title
        item.catalog_number = catalog_number
        item.status = ItemStatus.AVAILABLE
        return item

    @classmethod
    def restore(
        cls,
        aggregate_id: str,
        version: int,
        barcode: str,
        title: str,
        catalog_number: str,
        status: ItemStatus | str,
    ) -> "Item":
        """Rebuild a stored item. For use by repositories."""
        item = cls(aggregate_id, version)
        item.barcode = barcode
        item.title = title
        item.catalog_number = catalog_number
        item.status = ItemStatus(status)
        return item

    # --- Transitions ---

    def mark_on_hold(self) -> "Item":
        """Place the item on hold.

        Raises:
            ItemStatusError: If the item is not available.
        """
        self._transition(ItemStatus.AVAILABLE, ItemStatus.ON_HOLD)
        return self

    def mark_issued(self) -> "Item":
        """Issue the item to the patron holding it.

        Raises:
            ItemStatusError: If the item is not on hold.
        """
        self._transition(ItemStatus.ON_HOLD, ItemStatus.ISSUED)
        return self

    def _transition(self, expected: ItemStatus, target: ItemStatus) -> None:
        if self.status is not expected:
            raise ItemStatusError(
                self.aggregate_id, self.barcode, self.status.value, target.value
            )
        self.status = target
