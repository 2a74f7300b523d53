"""SQLAlchemy Core implementations of the item and hold repositories.

Both repositories work on a single `Connection` owned by the unit of work;
they never commit. Writes are version-checked:

- version 0 (never saved) inserts a new row at version 1;
- otherwise ``UPDATE ... WHERE id = :id AND version = :loaded`` bumps the
  version, and zero affected rows means another writer got there first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError

from circulation.adapters.db.schema import holds, items
from circulation.domain.aggregates import Hold, Item, ItemStatus
from circulation.interfaces.repositories import (
    ConcurrentModificationError,
    DuplicateBarcodeError,
    HoldRepository,
    ItemRepository,
)

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Row

logger = logging.getLogger(__name__)


# Driver messages name either the constraint (PostgreSQL) or the column (SQLite)
BARCODE_CONSTRAINT_KEYWORDS = ("uq_items_barcode", "items.barcode")


def _is_barcode_conflict(error: IntegrityError) -> bool:
    msg = str(error.orig) if error.orig is not None else str(error)
    return any(kw in msg.lower() for kw in BARCODE_CONSTRAINT_KEYWORDS)


def _write(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    connection: Connection,
    table: Table,
    kind: str,
    aggregate_id: str,
    version: int,
    values: dict[str, Any],
) -> int:
    """Insert or version-checked update; return the new stored version.

    Raises:
        DuplicateBarcodeError: If an insert hits the unique item barcode.
        ConcurrentModificationError: If the ID already exists on insert, or
            the stored version moved on before an update.
    """
    new_version = version + 1
    if version == 0:
        try:
            connection.execute(
                insert(table).values(id=aggregate_id, version=new_version, **values)
            )
        except IntegrityError as e:
            if table is items and _is_barcode_conflict(e):
                raise DuplicateBarcodeError(values["barcode"]) from e
            raise ConcurrentModificationError(kind, aggregate_id, version) from e
    else:
        result = connection.execute(
            update(table)
            .where(table.c.id == aggregate_id, table.c.version == version)
            .values(version=new_version, **values)
        )
        if result.rowcount != 1:
            raise ConcurrentModificationError(kind, aggregate_id, version)
    logger.debug("Stored %s %s at version %d", kind, aggregate_id, new_version)
    return new_version


# ============================================================================
#                               Items
# ============================================================================


def _row_to_item(row: Row) -> Item:
    return Item.restore(
        aggregate_id=row.id,
        version=row.version,
        barcode=row.barcode,
        title=row.title,
        catalog_number=row.catalog_number,
        status=row.status,
    )


class SqlAlchemyItemRepository(ItemRepository):
    """ItemRepository backed by the `items` table."""

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    def _select_one(self, *criteria) -> Item | None:
        row = self._conn.execute(select(items).where(*criteria)).first()
        return _row_to_item(row) if row is not None else None

    def get_by_barcode(self, barcode: str) -> Item | None:
        return self._select_one(items.c.barcode == barcode)

    def find_available_by_barcode(self, barcode: str) -> Item | None:
        return self._select_one(
            items.c.barcode == barcode,
            items.c.status == ItemStatus.AVAILABLE.value,
        )

    def find_on_hold_by_barcode(self, barcode: str) -> Item | None:
        return self._select_one(
            items.c.barcode == barcode,
            items.c.status == ItemStatus.ON_HOLD.value,
        )

    def save(self, item: Item) -> Item:
        if item.version == 0 and self.get_by_barcode(item.barcode) is not None:
            raise DuplicateBarcodeError(item.barcode)

        new_version = _write(
            self._conn,
            items,
            item.KIND,
            item.aggregate_id,
            item.version,
            {
                "barcode": item.barcode,
                "title": item.title,
                "catalog_number": item.catalog_number,
                "status": item.status.value,
            },
        )
        item.mark_persisted(new_version)
        return item


# ============================================================================
#                               Holds
# ============================================================================


def _row_to_hold(row: Row) -> Hold:
    return Hold.restore(
        aggregate_id=row.id,
        version=row.version,
        barcode=row.barcode,
        patron_id=row.patron_id,
        date_of_hold=row.date_of_hold,
        status=row.status,
        date_of_checkout=row.date_of_checkout,
    )


class SqlAlchemyHoldRepository(HoldRepository):
    """HoldRepository backed by the `holds` table."""

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    def find_by_id(self, hold_id: str) -> Hold | None:
        row = self._conn.execute(select(holds).where(holds.c.id == hold_id)).first()
        return _row_to_hold(row) if row is not None else None

    def save(self, hold: Hold) -> Hold:
        new_version = _write(
            self._conn,
            holds,
            hold.KIND,
            hold.aggregate_id,
            hold.version,
            {
                "barcode": hold.barcode,
                "patron_id": hold.patron_id,
                "date_of_hold": hold.date_of_hold,
                "status": hold.status.value,
                "date_of_checkout": hold.date_of_checkout,
            },
        )
        hold.mark_persisted(new_version)
        return hold
