"""Ledger Schemas — mileage, deposits, deposit charges. All amounts >= 0."""

from uuid import UUID

from pydantic import BaseModel

from shopping_mall.schemas.common import (
    Money, NonEmptyStr, PageRequest, SoftDeletableResponse, Timestamp, UtcDatetime,
)


class MileageCreate(BaseModel):
    balance: Money
    status: NonEmptyStr


class MileageUpdate(BaseModel):
    balance: Money | None = None
    status: NonEmptyStr | None = None


class MileageSearch(PageRequest):
    status: str | None = None
    min_balance: float | None = None
    max_balance: float | None = None


class MileageResponse(SoftDeletableResponse):
    member_user_id: UUID
    balance: float
    status: str


class DepositCreate(BaseModel):
    deposit_amount: Money
    usable_balance: Money
    status: NonEmptyStr
    deposit_start_at: UtcDatetime | None = None
    deposit_end_at: UtcDatetime | None = None


class DepositUpdate(BaseModel):
    deposit_amount: Money | None = None
    usable_balance: Money | None = None
    status: NonEmptyStr | None = None
    deposit_start_at: UtcDatetime | None = None
    deposit_end_at: UtcDatetime | None = None


class DepositSearch(PageRequest):
    status: str | None = None
    min_usable_balance: float | None = None
    max_usable_balance: float | None = None


class DepositResponse(SoftDeletableResponse):
    member_user_id: UUID
    deposit_amount: float
    usable_balance: float
    status: str
    deposit_start_at: Timestamp | None
    deposit_end_at: Timestamp | None


class DepositChargeCreate(BaseModel):
    charge_amount: Money
    charge_status: NonEmptyStr
    payment_provider: str | None = None
    charged_at: UtcDatetime | None = None


class DepositChargeUpdate(BaseModel):
    charge_amount: Money | None = None
    charge_status: NonEmptyStr | None = None
    payment_provider: str | None = None
    charged_at: UtcDatetime | None = None


class DepositChargeSearch(PageRequest):
    charge_status: str | None = None
    payment_provider: str | None = None


class DepositChargeResponse(SoftDeletableResponse):
    member_user_id: UUID
    charge_amount: float
    charge_status: str
    payment_provider: str | None
    charged_at: Timestamp | None
