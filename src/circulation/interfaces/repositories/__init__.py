"""Repository Interface Package"""

from .errors import (
    ConcurrentModificationError,
    DuplicateBarcodeError,
    RepositoryError,
)
from .repositories import HoldRepository, ItemRepository

__all__ = [
    "ConcurrentModificationError",
    "DuplicateBarcodeError",
    "HoldRepository",
    "ItemRepository",
    "RepositoryError",
]
