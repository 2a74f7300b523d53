"""Tests for the items/holds table definitions and their constraints.

Runs against `metadata.create_all()` on in-memory SQLite; the migrated
schema is compared with the same tables in the integration suite.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect, insert
from sqlalchemy.exc import IntegrityError

from circulation.adapters.db.schema import HOLD_STATUSES, ITEM_STATUSES, holds, items

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=magic-value-comparison


def _item_row(**overrides):
    row = {
        "id": "I1",
        "barcode": "123",
        "title": "Dune",
        "catalog_number": "813.54",
        "status": "AVAILABLE",
        "version": 1,
    }
    row.update(overrides)
    return row


def test_status_vocabularies():
    """The allowed statuses match the aggregates' enums."""
    assert set(ITEM_STATUSES) == {"AVAILABLE", "ON_HOLD", "ISSUED"}
    assert set(HOLD_STATUSES) == {"PLACED", "CHECKED_OUT"}


def test_constraint_names_follow_convention(sqlite_engine_memory: Engine):
    """Primary keys, unique constraints and indexes get predictable names."""
    insp = inspect(sqlite_engine_memory)
    assert {uc["name"] for uc in insp.get_unique_constraints("items")} == {
        "uq_items_barcode"
    }
    assert {ix["name"] for ix in insp.get_indexes("holds")} == {
        "ix_holds_holds_barcode"
    }


def test_barcode_is_unique(sqlite_engine_memory: Engine):
    """Two items cannot share a barcode at the database level."""
    with sqlite_engine_memory.begin() as conn:
        conn.execute(insert(items).values(**_item_row()))
    with pytest.raises(IntegrityError):
        with sqlite_engine_memory.begin() as conn:
            conn.execute(insert(items).values(**_item_row(id="I2")))


@pytest.mark.parametrize(
    "overrides", [{"status": "LOST"}, {"version": 0}], ids=["status", "version"]
)
def test_item_check_constraints(sqlite_engine_memory: Engine, overrides):
    """Unknown statuses and non-positive versions are rejected."""
    with pytest.raises(IntegrityError):
        with sqlite_engine_memory.begin() as conn:
            conn.execute(insert(items).values(**_item_row(**overrides)))


def test_hold_status_check_constraint(sqlite_engine_memory: Engine):
    """Holds only accept PLACED or CHECKED_OUT."""
    with pytest.raises(IntegrityError):
        with sqlite_engine_memory.begin() as conn:
            conn.execute(
                insert(holds).values(
                    id="H1",
                    barcode="123",
                    patron_id="P1",
                    date_of_hold=datetime.date(2024, 2, 20),
                    status="CANCELLED",
                    version=1,
                )
            )
