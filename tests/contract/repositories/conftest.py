"""Fixtures for repository contract tests.

Every test runs once per unit-of-work backend so the in-memory repositories
used by tests and demos stay faithful to the SQLAlchemy ones.
"""

from collections.abc import Iterator

import pytest

from circulation.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from circulation.interfaces.unit_of_work import AbstractUnitOfWork


@pytest.fixture(params=["memory", "sqlite"])
def uow(request: pytest.FixtureRequest) -> Iterator[AbstractUnitOfWork]:
    """Return a fresh, empty unit of work for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUnitOfWork
      - `"sqlite"` → SqlAlchemyUnitOfWork on a migrated SQLite file
    """

    match request.param:
        case "memory":
            yield InMemoryUnitOfWork()
        case "sqlite":
            yield SqlAlchemyUnitOfWork(request.getfixturevalue("sqlite_engine_file"))
        case _:
            raise ValueError(f"unknown unit of work type: {request.param}")
