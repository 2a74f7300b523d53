"""Service-layer error definitions."""


class NotFoundError(LookupError):
    """Base class for lookups that found nothing in the expected state."""


class ItemNotAvailableError(NotFoundError):
    """Raised when no AVAILABLE item exists for a barcode."""

    barcode: str

    def __init__(self, barcode: str):
        super().__init__(f"No available item with barcode {barcode}.")
        self.barcode = barcode


class ItemNotOnHoldError(NotFoundError):
    """Raised when no ON_HOLD item exists for a barcode."""

    barcode: str

    def __init__(self, barcode: str):
        super().__init__(f"No item on hold with barcode {barcode}.")
        self.barcode = barcode


class HoldNotFoundError(NotFoundError):
    """Raised when a hold cannot be found by its ID."""

    hold_id: str

    def __init__(self, hold_id: str):
        super().__init__(f"Hold with ID {hold_id} not found.")
        self.hold_id = hold_id


class ItemNotFoundError(NotFoundError):
    """Raised when no item, in any status, has the requested barcode."""

    barcode: str

    def __init__(self, barcode: str):
        super().__init__(f"Item with barcode {barcode} not found.")
        self.barcode = barcode
