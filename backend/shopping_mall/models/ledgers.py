"""Ledger ORM — mileage balances, deposits and deposit charges, all member-owned."""

import uuid
from datetime import datetime

from sqlalchemy import String, Float, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Mileage(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_mileages"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    balance: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Deposit(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_deposits"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    deposit_amount: Mapped[float] = mapped_column(Float, nullable=False)
    usable_balance: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    deposit_start_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    deposit_end_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )


class DepositCharge(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_deposit_charges"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    charge_amount: Mapped[float] = mapped_column(Float, nullable=False)
    charge_status: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_provider: Mapped[str | None] = mapped_column(String(50), nullable=True)
    charged_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
