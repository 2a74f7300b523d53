"""create items and holds tables

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-19

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "items",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Time-ordered item ID."),
        sa.Column("barcode", sa.String(length=64), nullable=False, comment="External natural key."),
        sa.Column("title", sa.String(length=512), nullable=False),
        sa.Column("catalog_number", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, comment="Optimistic lock version."),
        sa.CheckConstraint(
            "status IN ('AVAILABLE', 'ON_HOLD', 'ISSUED')",
            name=op.f("ck_items_status_valid"),
        ),
        sa.CheckConstraint("version >= 1", name=op.f("ck_items_positive_version")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_items")),
        sa.UniqueConstraint("barcode", name=op.f("uq_items_barcode")),
        comment="Lendable catalog items.",
    )

    op.create_table(
        "holds",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Time-ordered hold ID."),
        sa.Column("barcode", sa.String(length=64), nullable=False, comment="Barcode of the held item."),
        sa.Column("patron_id", sa.String(length=36), nullable=False),
        sa.Column("date_of_hold", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("date_of_checkout", sa.Date(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, comment="Optimistic lock version."),
        sa.CheckConstraint(
            "status IN ('PLACED', 'CHECKED_OUT')",
            name=op.f("ck_holds_status_valid"),
        ),
        sa.CheckConstraint("version >= 1", name=op.f("ck_holds_positive_version")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_holds")),
        comment="Holds placed by patrons on items.",
    )
    op.create_index(
        op.f("ix_holds_holds_barcode"), "holds", ["barcode"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_holds_holds_barcode"), table_name="holds")
    op.drop_table("holds")
    op.drop_table("items")
