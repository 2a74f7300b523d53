"""Repository adapters for items and holds."""

from .memory import (
    InMemoryCirculationData,
    InMemoryHoldRepository,
    InMemoryItemRepository,
)
from .sqlalchemy_repositories import SqlAlchemyHoldRepository, SqlAlchemyItemRepository

__all__ = [
    "InMemoryCirculationData",
    "InMemoryHoldRepository",
    "InMemoryItemRepository",
    "SqlAlchemyHoldRepository",
    "SqlAlchemyItemRepository",
]
