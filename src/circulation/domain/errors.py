"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                           Item related errors
# ============================================================================


class ItemStatusError(InvalidTransitionError):
    """Raised when an item transition is invoked from the wrong status.

    The circulation desk only transitions items it looked up in the expected
    status, so this error signals an orchestration bug and is never handled
    by the core.
    """

    def __init__(
        self, aggregate_id: str, barcode: str, current: str, attempted: str
    ) -> None:
        super().__init__(
            f"Item {aggregate_id} ({barcode}) cannot move to {attempted} "
            f"from {current}."
        )
        self.aggregate_id = aggregate_id
        self.barcode = barcode
        self.current = current
        self.attempted = attempted


# ============================================================================
#                           Hold related errors
# ============================================================================


class HoldNotPlacedError(InvalidTransitionError):
    """Raised when checking out a hold that is no longer placed."""

    def __init__(self, aggregate_id: str, status: str) -> None:
        super().__init__(f"Hold {aggregate_id} is {status} and cannot be checked out.")
        self.aggregate_id = aggregate_id
        self.status = status


class HoldOwnershipError(DomainError, ValueError):
    """Raised when a patron tries to check out a hold placed by someone else."""

    MESSAGE = "Hold does not belong to the specified patron"

    def __init__(self, hold_id: str, patron_id: str) -> None:
        super().__init__(self.MESSAGE)
        self.hold_id = hold_id
        self.patron_id = patron_id
