"""Hold Aggregate"""

from datetime import date
from enum import Enum

from circulation.domain.errors import HoldNotPlacedError, HoldOwnershipError

from .base import Aggregate

# pylint: disable=too-many-arguments,
# pylint: disable=too-many-positional-arguments


class HoldStatus(str, Enum):
    """Lifecycle status of a hold."""

    PLACED = "PLACED"
    CHECKED_OUT = "CHECKED_OUT"


class Hold(Aggregate):
    """Aggregate root binding a patron to an item, pending checkout.

    The barcode and patron are fixed when the hold is placed.
    """

    KIND = "Hold"

    def __init__(self, aggregate_id: str, version: int = 0) -> None:
        super().__init__(aggregate_id, version)
        self.barcode: str = ""
        self.patron_id: str = ""
        self.date_of_hold: date | None = None
        self.status: HoldStatus = HoldStatus.PLACED
        self.date_of_checkout: date | None = None

    # --- Construction Paths ---

    @classmethod
    def place_hold(
        cls, aggregate_id: str, barcode: str, date_of_hold: date, patron_id: str
    ) -> "Hold":
        """Place a new hold for a patron on the item with the given barcode."""
        hold = cls(aggregate_id)
        hold.barcode = barcode
        hold.date_of_hold = date_of_hold
        hold.patron_id = patron_id
        hold.status = HoldStatus.PLACED
        return hold

    @classmethod
    def restore(
        cls,
        aggregate_id: str,
        version: int,
        barcode: str,
        patron_id: str,
        date_of_hold: date,
        status: HoldStatus | str,
        date_of_checkout: date | None = None,
    ) -> "Hold":
        """Rebuild a stored hold. For use by repositories."""
        hold = cls(aggregate_id, version)
        hold.barcode = barcode
        hold.patron_id = patron_id
        hold.date_of_hold = date_of_hold
        hold.status = HoldStatus(status)
        hold.date_of_checkout = date_of_checkout
        return hold

    # --- Transitions ---

    def checkout(self, date_of_checkout: date, patron_id: str) -> "Hold":
        """Check out the held item.

        Args:
            date_of_checkout: The date the item leaves the desk.
            patron_id: The patron collecting the item.

        Raises:
            HoldOwnershipError: If the patron did not place this hold. Checked
                before anything else, whatever the hold's status.
            HoldNotPlacedError: If the hold was already checked out.
        """
        if patron_id != self.patron_id:
            raise HoldOwnershipError(self.aggregate_id, patron_id)
        if self.status is not HoldStatus.PLACED:
            raise HoldNotPlacedError(self.aggregate_id, self.status.value)

        self.status = HoldStatus.CHECKED_OUT
        self.date_of_checkout = date_of_checkout
        return self
