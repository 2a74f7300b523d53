"""Units of Work for the circulation service.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
SQLAlchemy-backed item and hold repositories, plus an in-memory variant used
by tests and demos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from circulation.adapters.repositories import (
    InMemoryCirculationData,
    InMemoryHoldRepository,
    InMemoryItemRepository,
    SqlAlchemyHoldRepository,
    SqlAlchemyItemRepository,
)
from circulation.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.items = SqlAlchemyItemRepository(self.connection)
        self.holds = SqlAlchemyHoldRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over the in-memory repositories.

    Changes are written to a working copy of the data on entry and only
    published to the shared store on `commit`, so a rolled back unit leaves
    the store untouched. The repositories stay usable outside a `with` block,
    in which case writes go straight to the shared store.
    """

    def __init__(self, data: InMemoryCirculationData | None = None):
        self.data = data if data is not None else InMemoryCirculationData()
        self._working: InMemoryCirculationData | None = None
        self._bind(self.data)
        self.committed = False

    def _bind(self, data: InMemoryCirculationData) -> None:
        self.items = InMemoryItemRepository(data)
        self.holds = InMemoryHoldRepository(data)

    def __enter__(self):
        self._working = InMemoryCirculationData(
            items=dict(self.data.items), holds=dict(self.data.holds)
        )
        self._bind(self._working)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self._working = None
        self._bind(self.data)

    def commit(self):
        if self._working is not None:
            self.data.items = dict(self._working.items)
            self.data.holds = dict(self._working.holds)
        self.committed = True

    def rollback(self):
        if self._working is not None:
            self._working.items = dict(self.data.items)
            self._working.holds = dict(self.data.holds)
