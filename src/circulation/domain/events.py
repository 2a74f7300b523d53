"""Events"""

import abc
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the owning aggregate ID.
    """

    @property
    @abc.abstractmethod
    def aggregate_id(self) -> str:
        """Return the ID of the aggregate this event belongs to."""


@dataclass(frozen=True, slots=True)
class HoldPlaced(DomainEvent):
    """Event indicating that a patron placed a hold on an item."""

    hold_id: str
    barcode: str
    date_of_hold: date

    @property
    def aggregate_id(self) -> str:
        return self.hold_id


@dataclass(frozen=True, slots=True)
class BookCheckedOut(DomainEvent):
    """Event indicating that a held item was checked out by its patron."""

    hold_id: str
    barcode: str
    date_of_checkout: date

    @property
    def aggregate_id(self) -> str:
        return self.hold_id


# Registry of the domain event types the application publishes
DOMAIN_EVENT_REGISTRY: dict[str, type[DomainEvent]] = {
    "HoldPlaced": HoldPlaced,
    "BookCheckedOut": BookCheckedOut,
}
