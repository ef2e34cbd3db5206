"""Actor ORM — the four caller roles: members, sellers, admins, guests.

Invariants:
    - email is unique per role table
    - password_hash is a bcrypt hash, never returned by any endpoint
    - All actors are soft-deleted; a soft-deleted actor cannot authenticate
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class MemberUser(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_member_users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")


class SellerUser(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_seller_users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    business_registration_number: Mapped[str] = mapped_column(
        String(50), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")


class AdminUser(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_admin_users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")


class GuestUser(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_guest_users"

    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)


ACCOUNT_MODELS = {
    "member": MemberUser,
    "seller": SellerUser,
    "admin": AdminUser,
    "guest": GuestUser,
}
