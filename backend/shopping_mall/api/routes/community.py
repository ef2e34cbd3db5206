"""Review & Inquiry Routes — a member's own reviews and inquiries; admin inquiry moderation.

Invariants:
    - Owner column is member_user_id, set to the caller on create
    - "My reviews" / "my inquiries" searches always filter on the caller
    - An inquiry about a sale requires that sale to be live
    - A review naming a sale snapshot requires that snapshot to exist
    - Admins see every member's inquiries, including soft-deleted ones on request
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, member_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.models.community import Inquiry, Review
from shopping_mall.models.sales import Sale, SaleSnapshot
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.community import (
    AdminInquirySearch, InquiryCreate, InquiryResponse, InquirySearch, InquiryUpdate,
    ReviewCreate, ReviewResponse, ReviewSearch, ReviewUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import Listing, at_least, equals, search_any, search_page

router = APIRouter(prefix="/shoppingMall/memberUser", tags=["community"])
admin_router = APIRouter(prefix="/shoppingMall/adminUser", tags=["community"])

REVIEWS = Listing(Review, frozenset({"created_at", "updated_at", "rating", "status"}))
INQUIRIES = Listing(Inquiry, frozenset({"created_at", "updated_at", "title", "status"}))


async def _owned(lc: Lifecycle, model: type, row_id: UUID, actor: Actor):
    row = await lc.get_live(model, row_id)
    ensure_owner(row.member_user_id, actor, model.__name__.lower())
    return row


# ─── Reviews ─────────────────────────────────────────────────────

@router.patch("/reviews", response_model=Page[ReviewResponse])
async def search_reviews(
    body: ReviewSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, REVIEWS, body,
        equals(Review.member_user_id, actor.id),
        search_any((Review.review_title, Review.review_body), body.search),
        equals(Review.status, body.status),
        equals(Review.rating, body.rating),
        at_least(Review.rating, body.min_rating),
        equals(Review.is_private, body.is_private),
        equals(Review.shopping_mall_channel_id, body.shopping_mall_channel_id),
        dto=ReviewResponse,
    )


@router.get("/reviews/{review_id}", response_model=ReviewResponse)
async def get_review(
    review_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _owned(lc, Review, review_id, actor)


@router.post("/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    body: ReviewCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    if body.shopping_mall_sale_snapshot_id is not None:
        await lc.get_live(SaleSnapshot, body.shopping_mall_sale_snapshot_id)
    return await lc.create(Review, member_user_id=actor.id, **body.model_dump())


@router.put("/reviews/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: UUID,
    body: ReviewUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    review = await _owned(lc, Review, review_id, actor)
    return await lc.update(review, body.model_dump(exclude_unset=True))


@router.delete("/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(
    review_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await _owned(lc, Review, review_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Inquiries ───────────────────────────────────────────────────

@router.patch("/inquiries", response_model=Page[InquiryResponse])
async def search_inquiries(
    body: InquirySearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, INQUIRIES, body,
        equals(Inquiry.member_user_id, actor.id),
        search_any((Inquiry.title, Inquiry.body), body.search),
        equals(Inquiry.status, body.status),
        equals(Inquiry.is_private, body.is_private),
        equals(Inquiry.shopping_mall_sale_id, body.shopping_mall_sale_id),
        dto=InquiryResponse,
    )


@router.get("/inquiries/{inquiry_id}", response_model=InquiryResponse)
async def get_inquiry(
    inquiry_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _owned(lc, Inquiry, inquiry_id, actor)


@router.post("/inquiries", response_model=InquiryResponse, status_code=status.HTTP_201_CREATED)
async def create_inquiry(
    body: InquiryCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    if body.shopping_mall_sale_id is not None:
        await lc.get_live(Sale, body.shopping_mall_sale_id)
    return await lc.create(Inquiry, member_user_id=actor.id, **body.model_dump())


@router.put("/inquiries/{inquiry_id}", response_model=InquiryResponse)
async def update_inquiry(
    inquiry_id: UUID,
    body: InquiryUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    inquiry = await _owned(lc, Inquiry, inquiry_id, actor)
    return await lc.update(inquiry, body.model_dump(exclude_unset=True))


@router.delete("/inquiries/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inquiry(
    inquiry_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await _owned(lc, Inquiry, inquiry_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Admin: inquiry moderation ───────────────────────────────────

@admin_router.patch("/inquiries", response_model=Page[InquiryResponse])
async def admin_search_inquiries(
    body: AdminInquirySearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, INQUIRIES, body,
        equals(Inquiry.member_user_id, body.member_user_id),
        search_any((Inquiry.title, Inquiry.body), body.search),
        equals(Inquiry.status, body.status),
        equals(Inquiry.is_private, body.is_private),
        equals(Inquiry.shopping_mall_sale_id, body.shopping_mall_sale_id),
        dto=InquiryResponse,
        deleted=body.deleted,
    )


@admin_router.get("/inquiries/{inquiry_id}", response_model=InquiryResponse)
async def admin_get_inquiry(
    inquiry_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Inquiry, inquiry_id)


@admin_router.put("/inquiries/{inquiry_id}", response_model=InquiryResponse)
async def admin_update_inquiry(
    inquiry_id: UUID,
    body: InquiryUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    inquiry = await lc.get_live(Inquiry, inquiry_id)
    return await lc.update(inquiry, body.model_dump(exclude_unset=True))


@admin_router.delete("/inquiries/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_inquiry(
    inquiry_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Inquiry, inquiry_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
