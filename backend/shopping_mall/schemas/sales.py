"""Sale Schemas — sales, sale units, option groups and options.

Invariants:
    - price >= 0
    - Snapshots are read-only on the wire: no create, update or delete bodies
    - AdminSaleSearch exposes the soft-delete mode; seller searches are always live-only
"""

from uuid import UUID

from pydantic import BaseModel, Field

from shopping_mall.core.domain_types import SoftDeleteMode
from shopping_mall.schemas.common import (
    ApiModel, Money, NonEmptyStr, PageRequest, SoftDeletableResponse, Timestamp,
    UtcDatetime,
)


class SaleCreate(BaseModel):
    shopping_mall_channel_id: UUID
    shopping_mall_section_id: UUID | None = None
    shopping_mall_seller_user_id: UUID
    code: NonEmptyStr
    status: NonEmptyStr
    name: NonEmptyStr
    description: str | None = None
    price: Money


class SaleUpdate(BaseModel):
    shopping_mall_section_id: UUID | None = None
    code: NonEmptyStr | None = None
    status: NonEmptyStr | None = None
    name: NonEmptyStr | None = None
    description: str | None = None
    price: Money | None = None


class SaleSearch(PageRequest):
    search: str | None = None
    code: str | None = None
    status: str | None = None
    shopping_mall_channel_id: UUID | None = None
    shopping_mall_section_id: UUID | None = None
    min_price: float | None = None
    max_price: float | None = None


class AdminSaleSearch(SaleSearch):
    shopping_mall_seller_user_id: UUID | None = None
    deleted: SoftDeleteMode = SoftDeleteMode.LIVE


class SaleResponse(SoftDeletableResponse):
    shopping_mall_channel_id: UUID
    shopping_mall_section_id: UUID | None
    shopping_mall_seller_user_id: UUID
    code: str
    status: str
    name: str
    description: str | None
    price: float


# ─── Sale unit ───────────────────────────────────────────────────

class SaleUnitCreate(BaseModel):
    name: NonEmptyStr
    description: str | None = None
    status: NonEmptyStr


class SaleUnitUpdate(BaseModel):
    name: NonEmptyStr | None = None
    description: str | None = None
    status: NonEmptyStr | None = None


class SaleUnitSearch(PageRequest):
    name: str | None = None
    status: str | None = None


class SaleUnitResponse(SoftDeletableResponse):
    shopping_mall_sale_id: UUID
    name: str
    description: str | None
    status: str


# ─── Option vocabulary ───────────────────────────────────────────

class SaleOptionGroupCreate(BaseModel):
    code: NonEmptyStr
    name: NonEmptyStr


class SaleOptionGroupUpdate(BaseModel):
    code: NonEmptyStr | None = None
    name: NonEmptyStr | None = None


class SaleOptionGroupSearch(PageRequest):
    search: str | None = None
    code: str | None = None
    name: str | None = None


class SaleOptionGroupResponse(SoftDeletableResponse):
    code: str
    name: str


class SaleOptionCreate(BaseModel):
    shopping_mall_sale_option_group_id: UUID
    code: NonEmptyStr
    name: NonEmptyStr
    type: NonEmptyStr


class SaleOptionUpdate(BaseModel):
    shopping_mall_sale_option_group_id: UUID | None = None
    code: NonEmptyStr | None = None
    name: NonEmptyStr | None = None
    type: NonEmptyStr | None = None


class SaleOptionSearch(PageRequest):
    shopping_mall_sale_option_group_id: UUID | None = None
    code: str | None = None
    name: str | None = None
    type: str | None = None


class SaleOptionResponse(SoftDeletableResponse):
    shopping_mall_sale_option_group_id: UUID
    code: str
    name: str
    type: str


# ─── Sale snapshot ───────────────────────────────────────────────

class SaleSnapshotSearch(PageRequest):
    search: str | None = None
    statuses: list[str] | None = None
    created_from: UtcDatetime | None = None
    created_to: UtcDatetime | None = None
    min_price: float | None = None
    max_price: float | None = None


class SaleSnapshotResponse(ApiModel):
    id: UUID
    shopping_mall_sale_id: UUID
    code: str
    status: str
    name: str
    description: str | None
    price: float
    created_at: Timestamp


# ─── Sale unit option ────────────────────────────────────────────

class SaleUnitOptionCreate(BaseModel):
    shopping_mall_sale_option_id: UUID
    additional_price: Money
    stock_quantity: int = Field(ge=0)


class SaleUnitOptionUpdate(BaseModel):
    shopping_mall_sale_option_id: UUID | None = None
    additional_price: Money | None = None
    stock_quantity: int | None = Field(None, ge=0)


class SaleUnitOptionSearch(PageRequest):
    shopping_mall_sale_option_id: UUID | None = None


class SaleUnitOptionResponse(SoftDeletableResponse):
    shopping_mall_sale_unit_id: UUID
    shopping_mall_sale_option_id: UUID
    additional_price: float
    stock_quantity: int
