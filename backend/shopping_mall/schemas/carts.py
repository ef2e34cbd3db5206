"""Cart Schemas — carts, cart items, cart item options.

Invariants:
    - quantity >= 1, unit_price >= 0
    - member_user_id in a cart request is ignored on create: the caller owns the cart
"""

from uuid import UUID

from pydantic import BaseModel, Field

from shopping_mall.schemas.common import (
    EntityResponse, Money, NonEmptyStr, PageRequest, SoftDeletableResponse,
)


class CartCreate(BaseModel):
    status: NonEmptyStr


class CartUpdate(BaseModel):
    status: NonEmptyStr | None = None


class CartSearch(PageRequest):
    member_user_id: UUID | None = None
    status: str | None = None


class CartResponse(SoftDeletableResponse):
    member_user_id: UUID
    status: str


class CartItemCreate(BaseModel):
    shopping_sale_snapshot_id: UUID
    quantity: int = Field(ge=1)
    unit_price: Money
    status: NonEmptyStr


class CartItemUpdate(BaseModel):
    quantity: int | None = Field(None, ge=1)
    unit_price: Money | None = None
    status: NonEmptyStr | None = None


class CartItemSearch(PageRequest):
    shopping_sale_snapshot_id: UUID | None = None
    status: str | None = None
    min_quantity: int | None = None
    max_quantity: int | None = None


class CartItemResponse(SoftDeletableResponse):
    shopping_cart_id: UUID
    shopping_sale_snapshot_id: UUID
    quantity: int
    unit_price: float
    status: str


class CartItemOptionCreate(BaseModel):
    shopping_sale_option_id: UUID
    value: NonEmptyStr


class CartItemOptionUpdate(BaseModel):
    value: NonEmptyStr | None = None


class CartItemOptionSearch(PageRequest):
    shopping_sale_option_id: UUID | None = None
    value: str | None = None


class CartItemOptionResponse(EntityResponse):
    shopping_cart_item_id: UUID
    shopping_sale_option_id: UUID
    value: str
