"""Coupon Routes — admin coupon management, member coupon browsing and tickets.

Invariants:
    - coupon_code is unique
    - A coupon never ends before it starts, after create or after any partial update
    - Members only see live coupons whose status is "active"
    - Coupon tickets belong to the caller; the referenced coupon must be live
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.api.dependencies import admin_actor, member_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import ValidationFailedError
from shopping_mall.core.timestamps import as_utc
from shopping_mall.infrastructure.database import get_db
from shopping_mall.models.promotions import Coupon, CouponTicket
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.promotions import (
    CouponCreate, CouponResponse, CouponSearch, CouponTicketCreate,
    CouponTicketResponse, CouponTicketSearch, CouponTicketUpdate, CouponUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import Listing, equals, search_any, search_page

admin_router = APIRouter(prefix="/shoppingMall/adminUser/coupons", tags=["coupons"])
member_router = APIRouter(prefix="/shoppingMall/memberUser", tags=["coupons"])

ACTIVE = "active"

COUPONS = Listing(
    Coupon,
    frozenset({
        "created_at", "updated_at", "coupon_code", "coupon_name",
        "discount_value", "start_date", "end_date", "status",
    }),
)
TICKETS = Listing(
    CouponTicket, frozenset({"created_at", "updated_at", "expires_at", "status"}),
)


def ensure_period(start_date: datetime, end_date: datetime) -> None:
    if as_utc(end_date) < as_utc(start_date):
        raise ValidationFailedError(
            "end_date must not be before start_date", field="end_date",
        )


def _coupon_predicates(body: CouponSearch):
    return (
        search_any((Coupon.coupon_code, Coupon.coupon_name), body.search),
        equals(Coupon.coupon_code, body.coupon_code),
        equals(Coupon.discount_type, body.discount_type),
        equals(Coupon.shopping_mall_channel_id, body.shopping_mall_channel_id),
    )


# ─── Admin ───────────────────────────────────────────────────────

@admin_router.patch("", response_model=Page[CouponResponse])
async def admin_search_coupons(
    body: CouponSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, COUPONS, body,
        *_coupon_predicates(body),
        equals(Coupon.status, body.status),
        dto=CouponResponse,
    )


@admin_router.get("/{coupon_id}", response_model=CouponResponse)
async def admin_get_coupon(
    coupon_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Coupon, coupon_id)


@admin_router.post("", response_model=CouponResponse, status_code=status.HTTP_201_CREATED)
async def admin_create_coupon(
    body: CouponCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.ensure_unique(Coupon, "coupon_code", body.coupon_code)
    return await lc.create(Coupon, **body.model_dump())


@admin_router.put("/{coupon_id}", response_model=CouponResponse)
async def admin_update_coupon(
    coupon_id: UUID,
    body: CouponUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    coupon = await lc.get_live(Coupon, coupon_id)
    await lc.ensure_unique(Coupon, "coupon_code", body.coupon_code, exclude_id=coupon.id)
    ensure_period(
        body.start_date or coupon.start_date, body.end_date or coupon.end_date,
    )
    return await lc.update(coupon, body.model_dump(exclude_unset=True))


@admin_router.delete("/{coupon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_coupon(
    coupon_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Coupon, coupon_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Member: coupons ─────────────────────────────────────────────

@member_router.patch("/coupons", response_model=Page[CouponResponse])
async def member_search_coupons(
    body: CouponSearch,
    actor: Actor = Depends(member_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, COUPONS, body,
        equals(Coupon.status, ACTIVE),
        *_coupon_predicates(body),
        dto=CouponResponse,
    )


@member_router.get("/coupons/{coupon_id}", response_model=CouponResponse)
async def member_get_coupon(
    coupon_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Coupon, coupon_id, Coupon.status == ACTIVE)


# ─── Member: coupon tickets ──────────────────────────────────────

async def _owned_ticket(lc: Lifecycle, ticket_id: UUID, actor: Actor) -> CouponTicket:
    ticket = await lc.get_live(CouponTicket, ticket_id)
    ensure_owner(ticket.member_user_id, actor, "coupon ticket")
    return ticket


@member_router.patch("/couponTickets", response_model=Page[CouponTicketResponse])
async def search_coupon_tickets(
    body: CouponTicketSearch,
    actor: Actor = Depends(member_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, TICKETS, body,
        equals(CouponTicket.member_user_id, actor.id),
        equals(CouponTicket.shopping_mall_coupon_id, body.shopping_mall_coupon_id),
        equals(CouponTicket.status, body.status),
        dto=CouponTicketResponse,
    )


@member_router.get("/couponTickets/{ticket_id}", response_model=CouponTicketResponse)
async def get_coupon_ticket(
    ticket_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _owned_ticket(lc, ticket_id, actor)


@member_router.post(
    "/couponTickets", response_model=CouponTicketResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_coupon_ticket(
    body: CouponTicketCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Coupon, body.shopping_mall_coupon_id)
    return await lc.create(CouponTicket, member_user_id=actor.id, **body.model_dump())


@member_router.put("/couponTickets/{ticket_id}", response_model=CouponTicketResponse)
async def update_coupon_ticket(
    ticket_id: UUID,
    body: CouponTicketUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    ticket = await _owned_ticket(lc, ticket_id, actor)
    return await lc.update(ticket, body.model_dump(exclude_unset=True))


@member_router.delete("/couponTickets/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_coupon_ticket(
    ticket_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await _owned_ticket(lc, ticket_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
