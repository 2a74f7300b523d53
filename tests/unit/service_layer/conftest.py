"""Pytest fixtures for service layer unit tests."""

from __future__ import annotations

import pytest

from .fakes import FakeUoW, RecordingPublisher, make_desk

# pylint: disable=redefined-outer-name


@pytest.fixture
def uow() -> FakeUoW:
    """A fresh fake unit of work."""
    return FakeUoW()


@pytest.fixture
def publisher() -> RecordingPublisher:
    """A publisher that only records events."""
    return RecordingPublisher()


@pytest.fixture
def desk(uow, publisher):
    """A circulation desk on the fake unit of work and recording publisher."""
    return make_desk(uow, publisher)
