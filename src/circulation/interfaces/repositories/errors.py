"""Exceptions for repository operations."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class ConcurrentModificationError(RepositoryError):
    """Conflict: the stored aggregate changed since it was loaded.

    Attributes:
        kind (str): The aggregate kind (e.g. "Item").
        aggregate_id (str): The ID of the aggregate being saved.
        expected (int): The version the caller loaded.
    """

    def __init__(self, kind: str, aggregate_id: str, expected: int):
        super().__init__(
            f"{kind} {aggregate_id} was modified concurrently "
            f"(expected stored version {expected})."
        )
        self.kind = kind
        self.aggregate_id = aggregate_id
        self.expected = expected


class DuplicateBarcodeError(RepositoryError):
    """Conflict: another item already uses the barcode.

    Attributes:
        barcode (str): The barcode that is already taken.
    """

    def __init__(self, barcode: str):
        super().__init__(f"An item with barcode '{barcode}' already exists.")
        self.barcode = barcode
