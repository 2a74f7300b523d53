"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from circulation.adapters.id_generators import (
    SimpleIdGenerator,
    TimeOrderedUUIDGenerator,
)
from circulation.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["time-ordered-uuid", "simple"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"time-ordered-uuid"` → TimeOrderedUUIDGenerator
      - `"simple"` → SimpleIdGenerator
    """

    match request.param:
        case "time-ordered-uuid":
            yield TimeOrderedUUIDGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["time-ordered-uuid"])
def monotonic_id_generators(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield instances of IdGenerators that promise monotonic ID order."""
    match request.param:
        case "time-ordered-uuid":
            yield TimeOrderedUUIDGenerator()
        case _:
            raise ValueError(f"unknown monotonic id generator type: {request.param}")
