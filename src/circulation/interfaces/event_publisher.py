"""Interface for publishing hold events.

The publisher delivers domain events synchronously: by the time `publish`
returns, every subscriber has run on the calling thread. Errors raised by a
subscriber propagate to the publisher's caller.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from circulation.domain.events import BookCheckedOut, DomainEvent, HoldPlaced

if TYPE_CHECKING:
    from circulation.domain.aggregates import Hold


class HoldEventPublisher(abc.ABC):
    """Contract for publishing the events raised by hold transitions."""

    @abc.abstractmethod
    def publish(self, event: DomainEvent) -> DomainEvent:
        """Deliver an event to its subscribers.

        Args:
            event: The event to publish.

        Returns:
            The published event (the same event unless the implementation
            transforms it).
        """

    def hold_placed(self, hold: Hold) -> Hold:
        """Publish `HoldPlaced` for a newly placed hold.

        Returns:
            The hold of record.
        """
        if hold.date_of_hold is None:
            raise ValueError(f"Hold {hold.aggregate_id} has no date of hold")
        self.publish(
            HoldPlaced(
                hold_id=hold.aggregate_id,
                barcode=hold.barcode,
                date_of_hold=hold.date_of_hold,
            )
        )
        return hold

    def book_checked_out(self, hold: Hold) -> Hold:
        """Publish `BookCheckedOut` for a hold that was just checked out.

        Returns:
            The hold of record.
        """
        if hold.date_of_checkout is None:
            raise ValueError(f"Hold {hold.aggregate_id} has not been checked out")
        self.publish(
            BookCheckedOut(
                hold_id=hold.aggregate_id,
                barcode=hold.barcode,
                date_of_checkout=hold.date_of_checkout,
            )
        )
        return hold
