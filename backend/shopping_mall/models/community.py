"""Community ORM — reviews, inquiries, and comments on either.

Invariants:
    - review/inquiry owner column: member_user_id
    - A comment targets exactly one of review_id / inquiry_id
    - A comment records its author in the column matching the author's role
      (member_user_id, seller_user_id or admin_user_id); that column is the owner column
"""

import uuid

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class Review(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_reviews"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    shopping_mall_channel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, nullable=True,
    )
    shopping_mall_sale_snapshot_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sale_snapshots.id"), nullable=True,
    )
    review_title: Mapped[str] = mapped_column(String(200), nullable=False)
    review_body: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Inquiry(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_inquiries"

    member_user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=False,
    )
    shopping_mall_sale_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_sales.id"), nullable=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Comment(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_comments"

    review_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_reviews.id"), nullable=True,
    )
    inquiry_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_inquiries.id"), nullable=True,
    )
    member_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_member_users.id"), nullable=True,
    )
    seller_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_seller_users.id"), nullable=True,
    )
    admin_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("shopping_mall_admin_users.id"), nullable=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
