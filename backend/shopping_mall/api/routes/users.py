"""User Routes — admin lookup of accounts, member self-service profile.

Invariants:
    - Account DTOs never include password_hash
    - Admin account search covers email / nickname / full_name via `search`
    - /memberUser/me only ever touches the caller's own row
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.api.dependencies import admin_actor, member_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.infrastructure.database import get_db
from shopping_mall.models.actors import GuestUser, MemberUser, SellerUser
from shopping_mall.schemas.actors import (
    AccountSearch, GuestUserResponse, GuestUserSearch, MemberUserResponse,
    MemberUserUpdate, SellerUserResponse,
)
from shopping_mall.schemas.common import Page
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, contains, equals, search_any, search_page

admin_router = APIRouter(prefix="/shoppingMall/adminUser", tags=["users"])
member_router = APIRouter(prefix="/shoppingMall/memberUser", tags=["users"])

_ACCOUNT_SORTS = frozenset({"created_at", "updated_at", "email", "nickname", "full_name", "status"})

MEMBERS = Listing(MemberUser, _ACCOUNT_SORTS)
SELLERS = Listing(SellerUser, _ACCOUNT_SORTS)
GUESTS = Listing(GuestUser, frozenset({"created_at", "updated_at"}))


def _account_predicates(model: type, body: AccountSearch):
    return (
        search_any((model.email, model.nickname, model.full_name), body.search),
        contains(model.email, body.email),
        equals(model.status, body.status),
    )


@admin_router.patch("/memberUsers", response_model=Page[MemberUserResponse])
async def search_member_users(
    body: AccountSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, MEMBERS, body, *_account_predicates(MemberUser, body), dto=MemberUserResponse,
    )


@admin_router.get("/memberUsers/{user_id}", response_model=MemberUserResponse)
async def get_member_user(
    user_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(MemberUser, user_id)


@admin_router.patch("/sellerUsers", response_model=Page[SellerUserResponse])
async def search_seller_users(
    body: AccountSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, SELLERS, body, *_account_predicates(SellerUser, body), dto=SellerUserResponse,
    )


@admin_router.get("/sellerUsers/{user_id}", response_model=SellerUserResponse)
async def get_seller_user(
    user_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(SellerUser, user_id)


@admin_router.patch("/guestUsers", response_model=Page[GuestUserResponse])
async def search_guest_users(
    body: GuestUserSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, GUESTS, body,
        equals(GuestUser.ip_address, body.ip_address),
        contains(GuestUser.user_agent, body.user_agent),
        dto=GuestUserResponse,
    )


@admin_router.get("/guestUsers/{user_id}", response_model=GuestUserResponse)
async def get_guest_user(
    user_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(GuestUser, user_id)


# ─── Member self-service ─────────────────────────────────────────

@member_router.get("/me", response_model=MemberUserResponse)
async def get_me(
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(MemberUser, actor.id)


@member_router.put("/me", response_model=MemberUserResponse)
async def update_me(
    body: MemberUserUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    me = await lc.get_live(MemberUser, actor.id)
    return await lc.update(me, body.model_dump(exclude_unset=True))
