"""ORM Models — SQLAlchemy declarative models for all marketplace entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Soft-deletable models mix in SoftDeleteMixin; the rest are hard-deleted

Design Decisions:
    - One file per aggregate (actors, catalog, sales, carts, orders, ...)
    - All models imported here so Base.metadata is complete before
      create_all / alembic autogenerate runs
"""

from shopping_mall.models.actors import MemberUser, SellerUser, AdminUser, GuestUser  # noqa: F401
from shopping_mall.models.catalog import (  # noqa: F401
    Channel, Section, Category, CategoryRelation, ChannelCategory,
)
from shopping_mall.models.sales import (  # noqa: F401
    Sale, SaleUnit, SaleOptionGroup, SaleOption, SaleSnapshot, SaleUnitOption,
)
from shopping_mall.models.carts import Cart, CartItem, CartItemOption  # noqa: F401
from shopping_mall.models.orders import Order, OrderItem, Payment, Delivery  # noqa: F401
from shopping_mall.models.promotions import Coupon, CouponTicket  # noqa: F401
from shopping_mall.models.ledgers import Mileage, Deposit, DepositCharge  # noqa: F401
from shopping_mall.models.community import Review, Inquiry, Comment  # noqa: F401
from shopping_mall.models.analytics import FraudDetection  # noqa: F401
