"""Actor Dependencies — resolve the Bearer access token to an Actor of a required role.

Invariants:
    - Missing, malformed, expired or refresh-typed token → 401
    - Valid token for another role → 403
    - Account missing or soft-deleted → 401
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.core.domain_types import Actor, ActorType, TokenType
from shopping_mall.core.errors import ErrorContext, ForbiddenError, UnauthorizedError
from shopping_mall.infrastructure.database import get_db
from shopping_mall.infrastructure.tokens import decode_token
from shopping_mall.models.actors import ACCOUNT_MODELS

bearer = HTTPBearer(auto_error=False)


def _require(role: ActorType):
    model = ACCOUNT_MODELS[role.value]

    async def dependency(
        credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
        db: AsyncSession = Depends(get_db),
    ) -> Actor:
        if credentials is None:
            raise UnauthorizedError()
        actor = decode_token(credentials.credentials, TokenType.ACCESS)
        if actor.type is not role:
            raise ForbiddenError(
                f"This endpoint requires a {role.value} account",
                context=ErrorContext(actor_id=str(actor.id)),
            )
        live = await db.scalar(
            select(model.id).where(model.id == actor.id, model.deleted_at.is_(None)),
        )
        if live is None:
            raise UnauthorizedError(
                "Account no longer exists",
                context=ErrorContext(actor_id=str(actor.id)),
            )
        return actor

    dependency.__name__ = f"{role.value}_actor"
    return dependency


member_actor = _require(ActorType.MEMBER)
seller_actor = _require(ActorType.SELLER)
admin_actor = _require(ActorType.ADMIN)
guest_actor = _require(ActorType.GUEST)
