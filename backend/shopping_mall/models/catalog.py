"""Catalog ORM — channels, sections, categories and their links.

Invariants:
    - channel.code and category.code are unique
    - A section always belongs to a channel
    - category_relation rows have no deleted_at: they are hard-deleted
"""

import uuid

from sqlalchemy import String, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Channel(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_channels"

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Section(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_sections"

    shopping_mall_channel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_channels.id"), nullable=False,
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Category(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_categories"

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class CategoryRelation(Base):
    __tablename__ = "shopping_mall_category_relations"

    parent_category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_categories.id"), nullable=False,
    )
    child_category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_categories.id"), nullable=False,
    )


class ChannelCategory(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_channel_categories"

    shopping_mall_channel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_channels.id"), nullable=False,
    )
    shopping_mall_category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_categories.id"), nullable=False,
    )
