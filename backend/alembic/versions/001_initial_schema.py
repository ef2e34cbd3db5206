"""Initial schema — accounts, catalog, sales, carts, orders, promotions, ledgers, community, analytics.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id():
    return sa.Column("id", UUID(as_uuid=True), primary_key=True)


def _fk(name: str, table: str, nullable: bool = False):
    return sa.Column(name, UUID(as_uuid=True), sa.ForeignKey(f"{table}.id"), nullable=nullable)


def _ref(name: str, nullable: bool = False):
    return sa.Column(name, UUID(as_uuid=True), nullable=nullable)


def _stamps(soft: bool = True):
    cols = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]
    if soft:
        cols.append(sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True))
    return cols


def _account_columns():
    return [
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("nickname", sa.String(100), nullable=False),
        sa.Column("full_name", sa.String(100), nullable=False),
    ]


def upgrade() -> None:
    # ─── Accounts ────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_member_users", _id(), *_account_columns(),
        sa.Column("phone_number", sa.String(30), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_seller_users", _id(), *_account_columns(),
        sa.Column("phone_number", sa.String(30), nullable=True),
        sa.Column("business_registration_number", sa.String(50), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_admin_users", _id(), *_account_columns(),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_guest_users", _id(),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(500), nullable=True),
        *_stamps(),
    )

    # ─── Catalog ─────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_channels", _id(),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_sections", _id(),
        _fk("shopping_mall_channel_id", "shopping_mall_channels"),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_categories", _id(),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_category_relations", _id(),
        _fk("parent_category_id", "shopping_mall_categories"),
        _fk("child_category_id", "shopping_mall_categories"),
        *_stamps(soft=False),
    )
    op.create_table(
        "shopping_mall_channel_categories", _id(),
        _fk("shopping_mall_channel_id", "shopping_mall_channels"),
        _fk("shopping_mall_category_id", "shopping_mall_categories"),
        *_stamps(),
    )

    # ─── Sales ───────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_sales", _id(),
        _fk("shopping_mall_channel_id", "shopping_mall_channels"),
        _fk("shopping_mall_section_id", "shopping_mall_sections", nullable=True),
        _fk("shopping_mall_seller_user_id", "shopping_mall_seller_users"),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Float, nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_sale_units", _id(),
        _fk("shopping_mall_sale_id", "shopping_mall_sales"),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_sale_option_groups", _id(),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_sale_options", _id(),
        _fk("shopping_mall_sale_option_group_id", "shopping_mall_sale_option_groups"),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        *_stamps(),
    )

    # ─── Carts ───────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_carts", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_cart_items", _id(),
        _fk("shopping_cart_id", "shopping_mall_carts"),
        _ref("shopping_sale_snapshot_id"),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("unit_price", sa.Float, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_cart_item_options", _id(),
        _fk("shopping_cart_item_id", "shopping_mall_cart_items"),
        _fk("shopping_sale_option_id", "shopping_mall_sale_options"),
        sa.Column("value", sa.String(200), nullable=False),
        *_stamps(soft=False),
    )

    # ─── Orders ──────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_orders", _id(),
        _fk("member_user_id", "shopping_mall_member_users", nullable=True),
        _fk("guest_user_id", "shopping_mall_guest_users", nullable=True),
        _ref("shopping_mall_channel_id"),
        _ref("shopping_mall_section_id", nullable=True),
        sa.Column("order_code", sa.String(50), nullable=False, unique=True),
        sa.Column("order_status", sa.String(20), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False),
        sa.Column("total_price", sa.Float, nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_order_items", _id(),
        _fk("shopping_mall_order_id", "shopping_mall_orders"),
        _ref("shopping_mall_sale_snapshot_id"),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("order_item_status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_payments", _id(),
        _fk("shopping_mall_order_id", "shopping_mall_orders"),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False),
        sa.Column("payment_amount", sa.Float, nullable=False),
        sa.Column("transaction_id", sa.String(100), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True),
        *_stamps(soft=False),
    )
    op.create_table(
        "shopping_mall_deliveries", _id(),
        _fk("shopping_mall_order_id", "shopping_mall_orders"),
        sa.Column("delivery_status", sa.String(20), nullable=False),
        sa.Column("delivery_stage", sa.String(20), nullable=False),
        sa.Column("expected_delivery_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        *_stamps(),
    )

    # ─── Promotions ──────────────────────────────────────────────
    op.create_table(
        "shopping_mall_coupons", _id(),
        _ref("shopping_mall_channel_id", nullable=True),
        sa.Column("coupon_code", sa.String(50), nullable=False, unique=True),
        sa.Column("coupon_name", sa.String(200), nullable=False),
        sa.Column("coupon_description", sa.Text, nullable=True),
        sa.Column("discount_type", sa.String(20), nullable=False),
        sa.Column("discount_value", sa.Float, nullable=False),
        sa.Column("max_discount_amount", sa.Float, nullable=True),
        sa.Column("min_order_amount", sa.Float, nullable=True),
        sa.Column("usage_limit", sa.Integer, nullable=True),
        sa.Column("per_customer_limit", sa.Integer, nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_coupon_tickets", _id(),
        _fk("shopping_mall_coupon_id", "shopping_mall_coupons"),
        _fk("member_user_id", "shopping_mall_member_users"),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        *_stamps(),
    )

    # ─── Ledgers ─────────────────────────────────────────────────
    op.create_table(
        "shopping_mall_mileages", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        sa.Column("balance", sa.Float, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_deposits", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        sa.Column("deposit_amount", sa.Float, nullable=False),
        sa.Column("usable_balance", sa.Float, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("deposit_start_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deposit_end_at", sa.DateTime(timezone=True), nullable=True),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_deposit_charges", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        sa.Column("charge_amount", sa.Float, nullable=False),
        sa.Column("charge_status", sa.String(20), nullable=False),
        sa.Column("payment_provider", sa.String(50), nullable=True),
        sa.Column("charged_at", sa.DateTime(timezone=True), nullable=True),
        *_stamps(),
    )

    # ─── Community ───────────────────────────────────────────────
    op.create_table(
        "shopping_mall_reviews", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        _ref("shopping_mall_channel_id", nullable=True),
        _ref("shopping_mall_sale_snapshot_id", nullable=True),
        sa.Column("review_title", sa.String(200), nullable=False),
        sa.Column("review_body", sa.Text, nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("is_private", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_inquiries", _id(),
        _fk("member_user_id", "shopping_mall_member_users"),
        _fk("shopping_mall_sale_id", "shopping_mall_sales", nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("is_private", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )
    op.create_table(
        "shopping_mall_comments", _id(),
        _fk("review_id", "shopping_mall_reviews", nullable=True),
        _fk("inquiry_id", "shopping_mall_inquiries", nullable=True),
        _fk("member_user_id", "shopping_mall_member_users", nullable=True),
        _fk("seller_user_id", "shopping_mall_seller_users", nullable=True),
        _fk("admin_user_id", "shopping_mall_admin_users", nullable=True),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("is_private", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("status", sa.String(20), nullable=False),
        *_stamps(),
    )

    # ─── Analytics ───────────────────────────────────────────────
    op.create_table(
        "shopping_mall_fraud_detections", _id(),
        _ref("shopping_mall_order_id", nullable=True),
        _ref("member_user_id", nullable=True),
        sa.Column("detection_type", sa.String(50), nullable=False),
        sa.Column("risk_level", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("details", sa.Text, nullable=True),
        sa.Column("detected_at", sa.DateTime(timezone=True), nullable=False),
        *_stamps(),
    )


def downgrade() -> None:
    for table in (
        "shopping_mall_fraud_detections",
        "shopping_mall_comments",
        "shopping_mall_inquiries",
        "shopping_mall_reviews",
        "shopping_mall_deposit_charges",
        "shopping_mall_deposits",
        "shopping_mall_mileages",
        "shopping_mall_coupon_tickets",
        "shopping_mall_coupons",
        "shopping_mall_deliveries",
        "shopping_mall_payments",
        "shopping_mall_order_items",
        "shopping_mall_orders",
        "shopping_mall_cart_item_options",
        "shopping_mall_cart_items",
        "shopping_mall_carts",
        "shopping_mall_sale_options",
        "shopping_mall_sale_option_groups",
        "shopping_mall_sale_units",
        "shopping_mall_sales",
        "shopping_mall_channel_categories",
        "shopping_mall_category_relations",
        "shopping_mall_categories",
        "shopping_mall_sections",
        "shopping_mall_channels",
        "shopping_mall_guest_users",
        "shopping_mall_admin_users",
        "shopping_mall_seller_users",
        "shopping_mall_member_users",
    ):
        op.drop_table(table)
