"""Promotion ORM — coupons and the tickets issued to members."""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Integer, Float, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Coupon(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_coupons"

    shopping_mall_channel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, nullable=True,
    )
    coupon_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    coupon_name: Mapped[str] = mapped_column(String(200), nullable=False)
    coupon_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    discount_type: Mapped[str] = mapped_column(String(20), nullable=False)
    discount_value: Mapped[float] = mapped_column(Float, nullable=False)
    max_discount_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    min_order_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    usage_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    per_customer_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class CouponTicket(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_coupon_tickets"

    shopping_mall_coupon_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_coupons.id"), nullable=False,
    )
    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
