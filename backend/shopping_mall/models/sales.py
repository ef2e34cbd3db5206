"""Sale ORM — seller listings, their units, and option vocabularies.

Invariants:
    - sale.shopping_mall_seller_user_id is the owner column for mutations
    - sale.code, sale_option_group.code and sale_option.code are unique
    - A sale option always belongs to an existing option group
    - Every sale write appends a snapshot; order, cart and review lines point
      at the snapshot they were priced from
"""

import uuid

from sqlalchemy import String, Text, Float, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Sale(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sales"

    shopping_mall_channel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_channels.id"), nullable=False,
    )
    shopping_mall_section_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sections.id"), nullable=True,
    )
    shopping_mall_seller_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_seller_users.id"), nullable=False,
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class SaleUnit(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sale_units"

    shopping_mall_sale_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sales.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class SaleOptionGroup(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sale_option_groups"

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)


class SaleOption(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sale_options"

    shopping_mall_sale_option_group_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_option_groups.id"), nullable=False,
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)


class SaleSnapshot(Base):
    """Frozen copy of a sale as it stood after one write; never updated or deleted."""
    __tablename__ = "shopping_mall_sale_snapshots"

    shopping_mall_sale_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sales.id"), nullable=False, index=True,
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class SaleUnitOption(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sale_unit_options"

    shopping_mall_sale_unit_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_units.id"), nullable=False,
    )
    shopping_mall_sale_option_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_options.id"), nullable=False,
    )
    additional_price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
