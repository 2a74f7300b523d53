"""In-memory item and hold repositories."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from circulation.domain.aggregates import Hold, Item, ItemStatus
from circulation.interfaces.repositories import (
    ConcurrentModificationError,
    DuplicateBarcodeError,
    HoldRepository,
    ItemRepository,
)

# pylint: disable=consider-using-assignment-expr


@dataclass(slots=True)
class InMemoryCirculationData:
    """Shared in-memory backing store for the in-memory repositories.

    A single shared instance lets the item and hold repositories act like
    tables in one database. Aggregates are stored as private copies, so
    changes made by callers only land through `save`.
    """

    # keyed by item id
    items: dict[str, Item] = field(default_factory=dict)

    # keyed by hold id
    holds: dict[str, Hold] = field(default_factory=dict)


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of the ItemRepository interface."""

    def __init__(self, data: InMemoryCirculationData):
        self._data = data

    def get_by_barcode(self, barcode: str) -> Item | None:
        for item in self._data.items.values():
            if item.barcode == barcode:
                return copy.deepcopy(item)
        return None

    def find_available_by_barcode(self, barcode: str) -> Item | None:
        return self._find(barcode, ItemStatus.AVAILABLE)

    def find_on_hold_by_barcode(self, barcode: str) -> Item | None:
        return self._find(barcode, ItemStatus.ON_HOLD)

    def _find(self, barcode: str, status: ItemStatus) -> Item | None:
        item = self.get_by_barcode(barcode)
        if item is None or item.status is not status:
            return None
        return item

    def save(self, item: Item) -> Item:
        if item.version == 0 and self.get_by_barcode(item.barcode) is not None:
            raise DuplicateBarcodeError(item.barcode)

        stored = self._data.items.get(item.aggregate_id)
        stored_version = stored.version if stored is not None else 0
        if stored_version != item.version:
            raise ConcurrentModificationError(item.KIND, item.aggregate_id, item.version)

        item.mark_persisted(item.version + 1)
        self._data.items[item.aggregate_id] = copy.deepcopy(item)
        return item


class InMemoryHoldRepository(HoldRepository):
    """In-memory implementation of the HoldRepository interface."""

    def __init__(self, data: InMemoryCirculationData):
        self._data = data

    def find_by_id(self, hold_id: str) -> Hold | None:
        hold = self._data.holds.get(hold_id)
        return copy.deepcopy(hold) if hold is not None else None

    def save(self, hold: Hold) -> Hold:
        stored = self._data.holds.get(hold.aggregate_id)
        stored_version = stored.version if stored is not None else 0
        if stored_version != hold.version:
            raise ConcurrentModificationError(hold.KIND, hold.aggregate_id, hold.version)

        hold.mark_persisted(hold.version + 1)
        self._data.holds[hold.aggregate_id] = copy.deepcopy(hold)
        return hold
