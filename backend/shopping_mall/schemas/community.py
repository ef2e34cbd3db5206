"""Community Schemas — reviews, inquiries and comments.

Invariants:
    - rating is an integer in 1..5
    - Author columns of a comment are never taken from the body
"""

from uuid import UUID

from pydantic import BaseModel, Field

from shopping_mall.core.domain_types import SoftDeleteMode
from shopping_mall.schemas.common import NonEmptyStr, PageRequest, SoftDeletableResponse


class ReviewCreate(BaseModel):
    shopping_mall_channel_id: UUID | None = None
    shopping_mall_sale_snapshot_id: UUID | None = None
    review_title: NonEmptyStr
    review_body: NonEmptyStr
    rating: int = Field(ge=1, le=5)
    is_private: bool = False
    status: NonEmptyStr


class ReviewUpdate(BaseModel):
    review_title: NonEmptyStr | None = None
    review_body: NonEmptyStr | None = None
    rating: int | None = Field(None, ge=1, le=5)
    is_private: bool | None = None
    status: NonEmptyStr | None = None


class ReviewSearch(PageRequest):
    search: str | None = None
    status: str | None = None
    rating: int | None = None
    min_rating: int | None = None
    is_private: bool | None = None
    shopping_mall_channel_id: UUID | None = None


class ReviewResponse(SoftDeletableResponse):
    member_user_id: UUID
    shopping_mall_channel_id: UUID | None
    shopping_mall_sale_snapshot_id: UUID | None
    review_title: str
    review_body: str
    rating: int
    is_private: bool
    status: str


class InquiryCreate(BaseModel):
    shopping_mall_sale_id: UUID | None = None
    title: NonEmptyStr
    body: NonEmptyStr
    is_private: bool = False
    status: NonEmptyStr


class InquiryUpdate(BaseModel):
    title: NonEmptyStr | None = None
    body: NonEmptyStr | None = None
    is_private: bool | None = None
    status: NonEmptyStr | None = None


class InquirySearch(PageRequest):
    search: str | None = None
    status: str | None = None
    is_private: bool | None = None
    shopping_mall_sale_id: UUID | None = None


class AdminInquirySearch(InquirySearch):
    member_user_id: UUID | None = None
    deleted: SoftDeleteMode = SoftDeleteMode.LIVE


class InquiryResponse(SoftDeletableResponse):
    member_user_id: UUID
    shopping_mall_sale_id: UUID | None
    title: str
    body: str
    is_private: bool
    status: str


class CommentCreate(BaseModel):
    body: NonEmptyStr
    is_private: bool = False
    status: NonEmptyStr


class CommentUpdate(BaseModel):
    body: NonEmptyStr | None = None
    is_private: bool | None = None
    status: NonEmptyStr | None = None


class CommentSearch(PageRequest):
    search: str | None = None
    status: str | None = None
    is_private: bool | None = None


class CommentResponse(SoftDeletableResponse):
    review_id: UUID | None
    inquiry_id: UUID | None
    member_user_id: UUID | None
    seller_user_id: UUID | None
    admin_user_id: UUID | None
    body: str
    is_private: bool
    status: str
