"""Actor Schemas — join/login/refresh payloads and account DTOs.

Invariants:
    - password is accepted on join/login only; password_hash is never serialized
    - email is validated (pydantic EmailStr)
    - Authorized responses embed the token pair with ISO-Z expiry instants
"""

from pydantic import AliasChoices, BaseModel, EmailStr, Field

from shopping_mall.schemas.common import (
    ApiModel, NonEmptyStr, PageRequest, SoftDeletableResponse, Timestamp,
)


class TokenResponse(ApiModel):
    access: str
    refresh: str
    expired_at: Timestamp
    refreshable_until: Timestamp


# ─── Requests ────────────────────────────────────────────────────

class MemberUserJoin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    nickname: NonEmptyStr
    full_name: NonEmptyStr
    phone_number: str | None = None


class SellerUserJoin(MemberUserJoin):
    business_registration_number: NonEmptyStr


class AdminUserJoin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    nickname: NonEmptyStr
    full_name: NonEmptyStr


class GuestUserJoin(BaseModel):
    ip_address: str | None = None
    user_agent: str | None = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    """Accepts refresh_token or the camelCase refreshToken."""
    refresh_token: str = Field(
        validation_alias=AliasChoices("refresh_token", "refreshToken"),
    )


class MemberUserUpdate(BaseModel):
    """Self-service profile update. Email and password are not editable here."""
    nickname: NonEmptyStr | None = None
    full_name: NonEmptyStr | None = None
    phone_number: str | None = None


class AccountSearch(PageRequest):
    """Admin search over member/seller accounts."""
    search: str | None = None
    email: str | None = None
    status: str | None = None


class GuestUserSearch(PageRequest):
    ip_address: str | None = None
    user_agent: str | None = None


# ─── Responses ───────────────────────────────────────────────────

class MemberUserResponse(SoftDeletableResponse):
    email: str
    nickname: str
    full_name: str
    phone_number: str | None
    status: str


class SellerUserResponse(MemberUserResponse):
    business_registration_number: str


class AdminUserResponse(SoftDeletableResponse):
    email: str
    nickname: str
    full_name: str
    status: str


class GuestUserResponse(SoftDeletableResponse):
    ip_address: str | None
    user_agent: str | None


class MemberUserAuthorized(MemberUserResponse):
    token: TokenResponse


class SellerUserAuthorized(SellerUserResponse):
    token: TokenResponse


class AdminUserAuthorized(AdminUserResponse):
    token: TokenResponse


class GuestUserAuthorized(GuestUserResponse):
    token: TokenResponse
