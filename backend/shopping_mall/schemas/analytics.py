"""Analytics Schemas — fraud detection records."""

from uuid import UUID

from pydantic import BaseModel

from shopping_mall.schemas.common import (
    NonEmptyStr, PageRequest, SoftDeletableResponse, Timestamp, UtcDatetime,
)


class FraudDetectionCreate(BaseModel):
    shopping_mall_order_id: UUID | None = None
    member_user_id: UUID | None = None
    detection_type: NonEmptyStr
    risk_level: NonEmptyStr
    status: NonEmptyStr
    details: str | None = None
    detected_at: UtcDatetime


class FraudDetectionUpdate(BaseModel):
    risk_level: NonEmptyStr | None = None
    status: NonEmptyStr | None = None
    details: str | None = None


class FraudDetectionSearch(PageRequest):
    detection_type: str | None = None
    risk_level: str | None = None
    status: str | None = None
    member_user_id: UUID | None = None
    shopping_mall_order_id: UUID | None = None
    detected_from: UtcDatetime | None = None
    detected_to: UtcDatetime | None = None


class FraudDetectionResponse(SoftDeletableResponse):
    shopping_mall_order_id: UUID | None
    member_user_id: UUID | None
    detection_type: str
    risk_level: str
    status: str
    details: str | None
    detected_at: Timestamp
