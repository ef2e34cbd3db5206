"""Sale snapshots and sale unit options.

Revision ID: 002_sale_snapshots
Revises: 001_initial
Create Date: 2026-10-18

Adds the snapshot table that cart items, order items and reviews already
reference, and turns those references into foreign keys.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "002_sale_snapshots"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SNAPSHOT_REFERENCES = [
    ("fk_cart_items_sale_snapshot", "shopping_mall_cart_items", "shopping_sale_snapshot_id"),
    ("fk_order_items_sale_snapshot", "shopping_mall_order_items", "shopping_mall_sale_snapshot_id"),
    ("fk_reviews_sale_snapshot", "shopping_mall_reviews", "shopping_mall_sale_snapshot_id"),
]


def upgrade() -> None:
    op.create_table(
        "shopping_mall_sale_snapshots",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "shopping_mall_sale_id", UUID(as_uuid=True),
            sa.ForeignKey("shopping_mall_sales.id"), nullable=False,
        ),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_shopping_mall_sale_snapshots_shopping_mall_sale_id",
        "shopping_mall_sale_snapshots", ["shopping_mall_sale_id"],
    )

    op.create_table(
        "shopping_mall_sale_unit_options",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "shopping_mall_sale_unit_id", UUID(as_uuid=True),
            sa.ForeignKey("shopping_mall_sale_units.id"), nullable=False,
        ),
        sa.Column(
            "shopping_mall_sale_option_id", UUID(as_uuid=True),
            sa.ForeignKey("shopping_mall_sale_options.id"), nullable=False,
        ),
        sa.Column("additional_price", sa.Float, nullable=False),
        sa.Column("stock_quantity", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    # Rows written before this revision may point at ids that never existed
    for name, table, column in SNAPSHOT_REFERENCES:
        op.create_foreign_key(
            name, table, "shopping_mall_sale_snapshots", [column], ["id"],
            postgresql_not_valid=True,
        )


def downgrade() -> None:
    for name, table, _ in SNAPSHOT_REFERENCES:
        op.drop_constraint(name, table, type_="foreignkey")
    op.drop_table("shopping_mall_sale_unit_options")
    op.drop_index(
        "ix_shopping_mall_sale_snapshots_shopping_mall_sale_id",
        table_name="shopping_mall_sale_snapshots",
    )
    op.drop_table("shopping_mall_sale_snapshots")
