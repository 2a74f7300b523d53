"""Integration tests for the SQLAlchemy item and hold repositories.

Each test runs against both an in-memory database built from `metadata` and
a file database built by the migrations, so the two schemas stay in step.
"""

import pytest

from circulation.adapters.unit_of_work import SqlAlchemyUnitOfWork
from circulation.domain.aggregates import HoldStatus, ItemStatus
from circulation.interfaces.repositories import (
    ConcurrentModificationError,
    DuplicateBarcodeError,
)
from tests.fixtures.datagen import BARCODE, HOLD_ID, ITEM_ID, PATRON_ID, TODAY

# pylint: disable=magic-value-comparison

ENGINES = pytest.mark.parametrize(
    "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
)


def _store(engine, *aggregates):
    uow = SqlAlchemyUnitOfWork(engine)
    with uow:
        for agg in aggregates:
            repo = uow.items if agg.KIND == "Item" else uow.holds
            repo.save(agg)
        uow.commit()


@ENGINES
class TestItemRepository:
    """Tests for SqlAlchemyItemRepository."""

    @staticmethod
    def test_save_then_get_by_barcode(engine, make_item):
        """A saved item comes back with every field and version 1."""
        item = make_item()
        _store(engine, item)
        assert item.version == 1

        with SqlAlchemyUnitOfWork(engine) as uow:
            loaded = uow.items.get_by_barcode(BARCODE)

        assert loaded is not None
        assert loaded.aggregate_id == ITEM_ID
        assert loaded.title == "The Hobbit"
        assert loaded.catalog_number == "823.912 TOL"
        assert loaded.status is ItemStatus.AVAILABLE
        assert loaded.version == 1

    @staticmethod
    def test_unknown_barcode_returns_none(engine):
        """Lookups for a barcode nobody saved return None."""
        with SqlAlchemyUnitOfWork(engine) as uow:
            assert uow.items.get_by_barcode("nope") is None
            assert uow.items.find_available_by_barcode("nope") is None
            assert uow.items.find_on_hold_by_barcode("nope") is None

    @staticmethod
    def test_status_filtered_finders(engine, make_item):
        """Finders only match items in their status."""
        _store(engine, make_item())

        uow = SqlAlchemyUnitOfWork(engine)
        with uow:
            item = uow.items.find_available_by_barcode(BARCODE)
            assert item is not None
            assert uow.items.find_on_hold_by_barcode(BARCODE) is None
            uow.items.save(item.mark_on_hold())
            uow.commit()

        with uow:
            assert uow.items.find_available_by_barcode(BARCODE) is None
            on_hold = uow.items.find_on_hold_by_barcode(BARCODE)
        assert on_hold is not None
        assert on_hold.status is ItemStatus.ON_HOLD
        assert on_hold.version == 2

    @staticmethod
    def test_duplicate_barcode_is_rejected(engine, make_item):
        """A second new item with a stored barcode raises DuplicateBarcodeError."""
        _store(engine, make_item())
        with pytest.raises(DuplicateBarcodeError):
            _store(engine, make_item(aggregate_id="another-id"))

    @staticmethod
    def test_barcode_taken_after_lookup(engine, make_item, monkeypatch):
        """A barcode stored between the lookup and the insert is still a duplicate."""
        _store(engine, make_item())

        uow = SqlAlchemyUnitOfWork(engine)
        with pytest.raises(DuplicateBarcodeError) as excinfo:
            with uow:
                # the other writer's row is not visible to the lookup
                monkeypatch.setattr(uow.items, "get_by_barcode", lambda barcode: None)
                uow.items.save(make_item(aggregate_id="another-id"))
        assert excinfo.value.barcode == BARCODE

    @staticmethod
    def test_duplicate_id_is_a_conflict(engine, make_item):
        """Inserting an ID that already exists is a concurrent modification."""
        _store(engine, make_item())
        with pytest.raises(ConcurrentModificationError) as excinfo:
            _store(engine, make_item(barcode="99999999"))
        assert excinfo.value.aggregate_id == ITEM_ID
        assert excinfo.value.expected == 0

    @staticmethod
    def test_stale_update_is_a_conflict(engine, make_item):
        """Saving a copy loaded before someone else's write raises."""
        _store(engine, make_item())

        uow = SqlAlchemyUnitOfWork(engine)
        with uow:
            stale = uow.items.get_by_barcode(BARCODE)
            fresh = uow.items.get_by_barcode(BARCODE)
        assert stale is not None and fresh is not None

        with uow:
            uow.items.save(fresh.mark_on_hold())
            uow.commit()

        with pytest.raises(ConcurrentModificationError) as excinfo:
            with uow:
                uow.items.save(stale.mark_on_hold())
                uow.commit()
        assert excinfo.value.kind == "Item"
        assert excinfo.value.expected == 1

        with uow:
            stored = uow.items.get_by_barcode(BARCODE)
        assert stored is not None
        assert stored.version == 2


@ENGINES
class TestHoldRepository:
    """Tests for SqlAlchemyHoldRepository."""

    @staticmethod
    def test_save_then_find_by_id(engine, make_hold):
        """A saved hold comes back with its dates as `date` objects."""
        _store(engine, make_hold())

        with SqlAlchemyUnitOfWork(engine) as uow:
            hold = uow.holds.find_by_id(HOLD_ID)

        assert hold is not None
        assert hold.barcode == BARCODE
        assert hold.patron_id == PATRON_ID
        assert hold.date_of_hold == TODAY
        assert hold.status is HoldStatus.PLACED
        assert hold.date_of_checkout is None
        assert hold.version == 1

    @staticmethod
    def test_unknown_id_returns_none(engine):
        """Unknown hold IDs return None."""
        with SqlAlchemyUnitOfWork(engine) as uow:
            assert uow.holds.find_by_id("missing") is None

    @staticmethod
    def test_checkout_is_persisted(engine, make_hold):
        """Checking out stores the status and the checkout date."""
        _store(engine, make_hold())

        uow = SqlAlchemyUnitOfWork(engine)
        with uow:
            hold = uow.holds.find_by_id(HOLD_ID)
            assert hold is not None
            uow.holds.save(hold.checkout(TODAY, PATRON_ID))
            uow.commit()

        with uow:
            stored = uow.holds.find_by_id(HOLD_ID)
        assert stored is not None
        assert stored.status is HoldStatus.CHECKED_OUT
        assert stored.date_of_checkout == TODAY
        assert stored.version == 2
