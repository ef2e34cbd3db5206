"""Cart ORM — member carts, their items, and per-item option choices.

Invariants:
    - cart.member_user_id is the owner column; items and options are owned through it
    - cart_item_option has no deleted_at: it is hard-deleted
    - shopping_sale_snapshot_id references the sale snapshot the item was priced from
"""

import uuid

from sqlalchemy import String, Integer, Float, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Cart(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_carts"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class CartItem(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_cart_items"

    shopping_cart_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_carts.id"), nullable=False,
    )
    shopping_sale_snapshot_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_snapshots.id"), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class CartItemOption(Base):
    __tablename__ = "shopping_mall_cart_item_options"

    shopping_cart_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_cart_items.id"), nullable=False,
    )
    shopping_sale_option_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_options.id"), nullable=False,
    )
    value: Mapped[str] = mapped_column(String(200), nullable=False)
