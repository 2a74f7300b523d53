"""SQLAlchemy Core tables for items and holds.

All tables attach to the shared `metadata`, whose naming convention gives
constraints and indexes deterministic names so Alembic autogenerate stays
quiet:

    - Indexes:       ix_<table>_<col...>
    - Unique:        uq_<table>_<col...>
    - Check:         ck_<table>_<constraint_name>
    - Primary key:   pk_<table>

Each row carries a `version` column; repositories update with
``WHERE version = <loaded version>`` to detect concurrent writers.
"""

from sqlalchemy import CheckConstraint, Column, Date, Integer, MetaData, String, Table

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

ITEM_STATUSES = ("AVAILABLE", "ON_HOLD", "ISSUED")
HOLD_STATUSES = ("PLACED", "CHECKED_OUT")


def _in(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


items = Table(
    "items",
    metadata,
    Column("id", String(36), primary_key=True, comment="Time-ordered item ID."),
    Column(
        "barcode",
        String(64),
        nullable=False,
        unique=True,
        comment="External natural key.",
    ),
    Column("title", String(512), nullable=False),
    Column("catalog_number", String(64), nullable=False),
    Column("status", String(16), nullable=False),
    Column("version", Integer, nullable=False, comment="Optimistic lock version."),
    CheckConstraint(_in("status", ITEM_STATUSES), name="status_valid"),
    CheckConstraint("version >= 1", name="positive_version"),
    comment="Lendable catalog items.",
)

holds = Table(
    "holds",
    metadata,
    Column("id", String(36), primary_key=True, comment="Time-ordered hold ID."),
    Column(
        "barcode",
        String(64),
        nullable=False,
        index=True,
        comment="Barcode of the held item.",
    ),
    Column("patron_id", String(36), nullable=False),
    Column("date_of_hold", Date, nullable=False),
    Column("status", String(16), nullable=False),
    Column("date_of_checkout", Date, nullable=True),
    Column("version", Integer, nullable=False, comment="Optimistic lock version."),
    CheckConstraint(_in("status", HOLD_STATUSES), name="status_valid"),
    CheckConstraint("version >= 1", name="positive_version"),
    comment="Holds placed by patrons on items.",
)
