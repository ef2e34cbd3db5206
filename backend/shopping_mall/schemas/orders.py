"""Order Schemas — orders, order items, payments, deliveries.

Invariants:
    - total_price, price, payment_amount >= 0; quantity >= 1
    - Status fields are free-form strings: any value may replace any other
    - Owner ids sent in an order create body are overwritten with the caller's id
"""

from uuid import UUID

from pydantic import BaseModel, Field

from shopping_mall.core.domain_types import SoftDeleteMode
from shopping_mall.schemas.common import (
    EntityResponse, Money, NonEmptyStr, PageRequest, SoftDeletableResponse,
    Timestamp, UtcDatetime,
)


class OrderCreate(BaseModel):
    member_user_id: UUID | None = None
    guest_user_id: UUID | None = None
    shopping_mall_channel_id: UUID
    shopping_mall_section_id: UUID | None = None
    order_code: NonEmptyStr
    order_status: NonEmptyStr
    payment_status: NonEmptyStr
    total_price: Money


class OrderUpdate(BaseModel):
    shopping_mall_section_id: UUID | None = None
    order_status: NonEmptyStr | None = None
    payment_status: NonEmptyStr | None = None
    total_price: Money | None = None


class OrderSearch(PageRequest):
    order_code: str | None = None
    order_status: str | None = None
    payment_status: str | None = None
    shopping_mall_channel_id: UUID | None = None
    min_total_price: float | None = None
    max_total_price: float | None = None


class AdminOrderSearch(OrderSearch):
    member_user_id: UUID | None = None
    guest_user_id: UUID | None = None
    deleted: SoftDeleteMode = SoftDeleteMode.LIVE


class OrderResponse(SoftDeletableResponse):
    member_user_id: UUID | None
    guest_user_id: UUID | None
    shopping_mall_channel_id: UUID
    shopping_mall_section_id: UUID | None
    order_code: str
    order_status: str
    payment_status: str
    total_price: float


# ─── Order item ──────────────────────────────────────────────────

class OrderItemCreate(BaseModel):
    shopping_mall_sale_snapshot_id: UUID
    quantity: int = Field(ge=1)
    price: Money
    order_item_status: NonEmptyStr


class OrderItemUpdate(BaseModel):
    quantity: int | None = Field(None, ge=1)
    price: Money | None = None
    order_item_status: NonEmptyStr | None = None


class OrderItemSearch(PageRequest):
    order_item_status: str | None = None
    shopping_mall_sale_snapshot_id: UUID | None = None


class OrderItemResponse(SoftDeletableResponse):
    shopping_mall_order_id: UUID
    shopping_mall_sale_snapshot_id: UUID
    quantity: int
    price: float
    order_item_status: str


# ─── Payment ─────────────────────────────────────────────────────

class PaymentCreate(BaseModel):
    shopping_mall_order_id: UUID
    payment_method: NonEmptyStr
    payment_status: NonEmptyStr
    payment_amount: Money
    transaction_id: str | None = None


class PaymentUpdate(BaseModel):
    payment_method: NonEmptyStr | None = None
    payment_status: NonEmptyStr | None = None
    payment_amount: Money | None = None
    transaction_id: str | None = None
    cancelled_at: UtcDatetime | None = None


class PaymentSearch(PageRequest):
    payment_method: str | None = None
    payment_status: str | None = None
    transaction_id: str | None = None


class PaymentResponse(EntityResponse):
    shopping_mall_order_id: UUID
    payment_method: str
    payment_status: str
    payment_amount: float
    transaction_id: str | None
    cancelled_at: Timestamp | None


# ─── Delivery ────────────────────────────────────────────────────

class DeliveryCreate(BaseModel):
    delivery_status: NonEmptyStr
    delivery_stage: NonEmptyStr
    expected_delivery_date: UtcDatetime | None = None
    start_time: UtcDatetime | None = None
    end_time: UtcDatetime | None = None


class DeliveryUpdate(BaseModel):
    delivery_status: NonEmptyStr | None = None
    delivery_stage: NonEmptyStr | None = None
    expected_delivery_date: UtcDatetime | None = None
    start_time: UtcDatetime | None = None
    end_time: UtcDatetime | None = None


class DeliverySearch(PageRequest):
    delivery_status: str | None = None
    delivery_stage: str | None = None


class DeliveryResponse(SoftDeletableResponse):
    shopping_mall_order_id: UUID
    delivery_status: str
    delivery_stage: str
    expected_delivery_date: Timestamp | None
    start_time: Timestamp | None
    end_time: Timestamp | None
