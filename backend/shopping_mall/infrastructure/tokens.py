"""Token Issuance — signs and verifies access/refresh JWTs with PyJWT.

Invariants:
    - Every token carries id, type (actor role), token_type, iss, iat, exp
    - decode_token() only returns claims for a signature-valid, unexpired token
      from our issuer whose token_type matches the one requested
    - All PyJWT failures surface as UnauthorizedError

Design Decisions:
    - HS256 with a shared secret from Settings
    - now is passed in by the caller so expiry is computed from the injected clock
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

import jwt

from shopping_mall.config import get_settings
from shopping_mall.core.domain_types import Actor, ActorId, ActorType, TokenType
from shopping_mall.core.errors import UnauthorizedError

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenPair:
    access: str
    refresh: str
    expired_at: datetime
    refreshable_until: datetime


def _sign(actor_id: UUID, actor_type: ActorType, token_type: TokenType,
          issued_at: datetime, expires_at: datetime) -> str:
    settings = get_settings()
    claims = {
        "id": str(actor_id),
        "type": actor_type.value,
        "token_type": token_type.value,
        "iss": settings.jwt_issuer,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=ALGORITHM)


def issue_tokens(actor_id: UUID, actor_type: ActorType, now: datetime) -> TokenPair:
    """Issue a fresh access/refresh pair for the actor."""
    settings = get_settings()
    expired_at = now + timedelta(seconds=settings.access_token_ttl_seconds)
    refreshable_until = now + timedelta(seconds=settings.refresh_token_ttl_seconds)
    return TokenPair(
        access=_sign(actor_id, actor_type, TokenType.ACCESS, now, expired_at),
        refresh=_sign(actor_id, actor_type, TokenType.REFRESH, now, refreshable_until),
        expired_at=expired_at,
        refreshable_until=refreshable_until,
    )


def decode_token(token: str, expected: TokenType) -> Actor:
    """Verify a token and return the actor it identifies."""
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[ALGORITHM],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iss", "id", "type"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")

    if claims.get("token_type") != expected.value:
        raise UnauthorizedError(f"Expected a {expected.value} token")
    try:
        return Actor(
            id=ActorId(UUID(claims["id"])), type=ActorType(claims["type"]),
        )
    except (ValueError, TypeError):
        raise UnauthorizedError("Invalid token payload")
