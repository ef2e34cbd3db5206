"""Order ORM — orders, order items, payments, deliveries.

Invariants:
    - An order is owned by a member (member_user_id) or a guest (guest_user_id)
    - order_code is unique
    - payment has no deleted_at (hard-deleted); cancellation is recorded in cancelled_at
    - order_status / payment_status / delivery_status are free-form: no transition guard
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Integer, Float, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Order(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_orders"

    member_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=True,
    )
    guest_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_guest_users.id"), nullable=True,
    )
    shopping_mall_channel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False,
    )
    shopping_mall_section_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, nullable=True,
    )
    order_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    order_status: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)


class OrderItem(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_order_items"

    shopping_mall_order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_orders.id"), nullable=False,
    )
    shopping_mall_sale_snapshot_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_snapshots.id"), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    order_item_status: Mapped[str] = mapped_column(String(20), nullable=False)


class Payment(Base):
    __tablename__ = "shopping_mall_payments"

    shopping_mall_order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_orders.id"), nullable=False,
    )
    payment_method: Mapped[str] = mapped_column(String(50), nullable=False)
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )


class Delivery(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_deliveries"

    shopping_mall_order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_orders.id"), nullable=False,
    )
    delivery_status: Mapped[str] = mapped_column(String(20), nullable=False)
    delivery_stage: Mapped[str] = mapped_column(String(20), nullable=False)
    expected_delivery_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    start_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    end_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
