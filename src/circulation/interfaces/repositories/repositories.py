"""Repository interfaces for items and holds.

Repositories are the sole arbiters of concurrent-write safety. `save` stores
the aggregate at `version + 1` and must refuse to overwrite a record whose
stored version differs from the version the aggregate was loaded with.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from circulation.domain.aggregates import Hold, Item


class ItemRepository(abc.ABC):
    """Contract for looking up and persisting catalog items."""

    @abc.abstractmethod
    def get_by_barcode(self, barcode: str) -> Item | None:
        """Get an item by its barcode, whatever its status.

        Args:
            barcode: The item's barcode.

        Returns:
            The item if found, otherwise None.
        """

    @abc.abstractmethod
    def find_available_by_barcode(self, barcode: str) -> Item | None:
        """Find the item with the given barcode if it is AVAILABLE.

        Implementations must guarantee that at most one concurrent caller
        can go on to hold the returned item (e.g. through the version check
        in `save`).

        Args:
            barcode: The item's barcode.

        Returns:
            The available item, or None if it does not exist or is not available.
        """

    @abc.abstractmethod
    def find_on_hold_by_barcode(self, barcode: str) -> Item | None:
        """Find the item with the given barcode if it is ON_HOLD.

        Args:
            barcode: The item's barcode.

        Returns:
            The held item, or None if it does not exist or is not on hold.
        """

    @abc.abstractmethod
    def save(self, item: Item) -> Item:
        """Insert or update an item.

        Args:
            item: The item to persist.

        Returns:
            The persisted item, with its version bumped.

        Raises:
            ConcurrentModificationError: If the stored version does not match.
            DuplicateBarcodeError: If a new item reuses an existing barcode.
        """


class HoldRepository(abc.ABC):
    """Contract for looking up and persisting holds."""

    @abc.abstractmethod
    def find_by_id(self, hold_id: str) -> Hold | None:
        """Get a hold by its ID.

        Args:
            hold_id: The hold's ID.

        Returns:
            The hold if found, otherwise None.
        """

    @abc.abstractmethod
    def save(self, hold: Hold) -> Hold:
        """Insert or update a hold.

        Args:
            hold: The hold to persist.

        Returns:
            The persisted hold, with its version bumped.

        Raises:
            ConcurrentModificationError: If the stored version does not match.
        """
