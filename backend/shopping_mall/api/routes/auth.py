"""Auth Routes — join / login / refresh for members, sellers, admins; join / refresh for guests.

Invariants:
    - Responses are the account DTO plus a token pair; password_hash never leaves
    - Guests have no credentials, so they have no login endpoint
"""

from fastapi import APIRouter, Depends, status

from shopping_mall.core.domain_types import ActorType
from shopping_mall.schemas.actors import (
    AdminUserAuthorized, AdminUserJoin, GuestUserAuthorized, GuestUserJoin,
    LoginRequest, MemberUserAuthorized, MemberUserJoin, RefreshRequest,
    SellerUserAuthorized, SellerUserJoin,
)
from shopping_mall.services.authentication import AuthService, authorized
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle

router = APIRouter(prefix="/auth", tags=["auth"])


# ─── Member ──────────────────────────────────────────────────────

@router.post(
    "/memberUser/join", response_model=MemberUserAuthorized,
    status_code=status.HTTP_201_CREATED,
)
async def join_member(body: MemberUserJoin, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.MEMBER).join(body.model_dump())
    return authorized(MemberUserAuthorized, account, tokens)


@router.post("/memberUser/login", response_model=MemberUserAuthorized)
async def login_member(body: LoginRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.MEMBER).login(body.email, body.password)
    return authorized(MemberUserAuthorized, account, tokens)


@router.post("/memberUser/refresh", response_model=MemberUserAuthorized)
async def refresh_member(body: RefreshRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.MEMBER).refresh(body.refresh_token)
    return authorized(MemberUserAuthorized, account, tokens)


# ─── Seller ──────────────────────────────────────────────────────

@router.post(
    "/sellerUser/join", response_model=SellerUserAuthorized,
    status_code=status.HTTP_201_CREATED,
)
async def join_seller(body: SellerUserJoin, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.SELLER).join(body.model_dump())
    return authorized(SellerUserAuthorized, account, tokens)


@router.post("/sellerUser/login", response_model=SellerUserAuthorized)
async def login_seller(body: LoginRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.SELLER).login(body.email, body.password)
    return authorized(SellerUserAuthorized, account, tokens)


@router.post("/sellerUser/refresh", response_model=SellerUserAuthorized)
async def refresh_seller(body: RefreshRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.SELLER).refresh(body.refresh_token)
    return authorized(SellerUserAuthorized, account, tokens)


# ─── Admin ───────────────────────────────────────────────────────

@router.post(
    "/adminUser/join", response_model=AdminUserAuthorized,
    status_code=status.HTTP_201_CREATED,
)
async def join_admin(body: AdminUserJoin, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.ADMIN).join(body.model_dump())
    return authorized(AdminUserAuthorized, account, tokens)


@router.post("/adminUser/login", response_model=AdminUserAuthorized)
async def login_admin(body: LoginRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.ADMIN).login(body.email, body.password)
    return authorized(AdminUserAuthorized, account, tokens)


@router.post("/adminUser/refresh", response_model=AdminUserAuthorized)
async def refresh_admin(body: RefreshRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.ADMIN).refresh(body.refresh_token)
    return authorized(AdminUserAuthorized, account, tokens)


# ─── Guest ───────────────────────────────────────────────────────

@router.post(
    "/guestUser/join", response_model=GuestUserAuthorized,
    status_code=status.HTTP_201_CREATED,
)
async def join_guest(body: GuestUserJoin, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.GUEST).join(body.model_dump())
    return authorized(GuestUserAuthorized, account, tokens)


@router.post("/guestUser/refresh", response_model=GuestUserAuthorized)
async def refresh_guest(body: RefreshRequest, lc: Lifecycle = Depends(get_lifecycle)):
    account, tokens = await AuthService(lc, ActorType.GUEST).refresh(body.refresh_token)
    return authorized(GuestUserAuthorized, account, tokens)
