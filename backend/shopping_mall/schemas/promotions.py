"""Promotion Schemas — coupons and coupon tickets.

Invariants:
    - discount_value >= 0; optional money bounds >= 0; limits >= 0
    - A coupon's end_date is not before its start_date
"""

from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from shopping_mall.schemas.common import (
    Money, NonEmptyStr, PageRequest, SoftDeletableResponse, Timestamp, UtcDatetime,
)


class CouponCreate(BaseModel):
    shopping_mall_channel_id: UUID | None = None
    coupon_code: NonEmptyStr
    coupon_name: NonEmptyStr
    coupon_description: str | None = None
    discount_type: NonEmptyStr
    discount_value: Money
    max_discount_amount: Money | None = None
    min_order_amount: Money | None = None
    usage_limit: int | None = Field(None, ge=0)
    per_customer_limit: int | None = Field(None, ge=0)
    start_date: UtcDatetime
    end_date: UtcDatetime
    status: NonEmptyStr

    @model_validator(mode="after")
    def check_period(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class CouponUpdate(BaseModel):
    shopping_mall_channel_id: UUID | None = None
    coupon_code: NonEmptyStr | None = None
    coupon_name: NonEmptyStr | None = None
    coupon_description: str | None = None
    discount_type: NonEmptyStr | None = None
    discount_value: Money | None = None
    max_discount_amount: Money | None = None
    min_order_amount: Money | None = None
    usage_limit: int | None = Field(None, ge=0)
    per_customer_limit: int | None = Field(None, ge=0)
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    status: NonEmptyStr | None = None


class CouponSearch(PageRequest):
    search: str | None = None
    coupon_code: str | None = None
    discount_type: str | None = None
    status: str | None = None
    shopping_mall_channel_id: UUID | None = None


class CouponResponse(SoftDeletableResponse):
    shopping_mall_channel_id: UUID | None
    coupon_code: str
    coupon_name: str
    coupon_description: str | None
    discount_type: str
    discount_value: float
    max_discount_amount: float | None
    min_order_amount: float | None
    usage_limit: int | None
    per_customer_limit: int | None
    start_date: Timestamp
    end_date: Timestamp
    status: str


class CouponTicketCreate(BaseModel):
    shopping_mall_coupon_id: UUID
    status: NonEmptyStr
    expires_at: UtcDatetime | None = None


class CouponTicketUpdate(BaseModel):
    status: NonEmptyStr | None = None
    used_at: UtcDatetime | None = None
    expires_at: UtcDatetime | None = None


class CouponTicketSearch(PageRequest):
    shopping_mall_coupon_id: UUID | None = None
    status: str | None = None


class CouponTicketResponse(SoftDeletableResponse):
    shopping_mall_coupon_id: UUID
    member_user_id: UUID
    status: str
    used_at: Timestamp | None
    expires_at: Timestamp | None
