"""Authentication — join, login and refresh for every account role.

Invariants:
    - Join pre-checks email uniqueness (ConflictError) before hashing
    - Login succeeds only for a live account with status "active" and a matching password;
      every failure is the same UnauthorizedError("Invalid credentials")
    - Refresh requires a refresh token of the same role for a live, active account
    - Token expiry is computed from the injected clock

Design Decisions:
    - One service for all roles, keyed by ActorType: the flows differ only
      in model and join fields
"""

import logging
from typing import Any

from sqlalchemy import select

from shopping_mall.core.domain_types import ActorType, TokenType
from shopping_mall.core.errors import ErrorContext, UnauthorizedError
from shopping_mall.infrastructure.passwords import hash_password, verify_password
from shopping_mall.infrastructure.tokens import TokenPair, decode_token, issue_tokens
from shopping_mall.models.actors import ACCOUNT_MODELS
from shopping_mall.schemas.actors import TokenResponse
from shopping_mall.services.lifecycle import Lifecycle

logger = logging.getLogger(__name__)

ACTIVE = "active"


def authorized(dto: type, account: Any, tokens: TokenPair):
    """Build an <Role>Authorized response: account DTO fields plus token."""
    fields = {
        name: getattr(account, name)
        for name in dto.model_fields if name != "token"
    }
    return dto(**fields, token=TokenResponse.model_validate(tokens))


class AuthService:
    """Account flows for one role."""

    def __init__(self, lifecycle: Lifecycle, actor_type: ActorType):
        self.lifecycle = lifecycle
        self.actor_type = actor_type
        self.model = ACCOUNT_MODELS[actor_type.value]

    async def join(self, fields: dict[str, Any]) -> tuple[Any, TokenPair]:
        """Create an account; password (if any) is stored only as a bcrypt hash."""
        if "email" in fields:
            await self.lifecycle.ensure_unique(self.model, "email", fields["email"])
        password = fields.pop("password", None)
        if password is not None:
            fields["password_hash"] = hash_password(password)
            fields.setdefault("status", ACTIVE)
        account = await self.lifecycle.create(self.model, **fields)
        logger.info(
            f"{self.actor_type.value} account joined",
            extra={"actor_id": account.id, "actor_type": self.actor_type.value},
        )
        return account, self._issue(account)

    async def login(self, email: str, password: str) -> tuple[Any, TokenPair]:
        account = await self.lifecycle.db.scalar(
            select(self.model).where(
                self.model.email == email,
                self.model.deleted_at.is_(None),
            ),
        )
        if (
            account is None
            or account.status != ACTIVE
            or not verify_password(password, account.password_hash)
        ):
            logger.warning(
                f"Failed {self.actor_type.value} login",
                extra={"actor_type": self.actor_type.value},
            )
            raise UnauthorizedError("Invalid credentials")
        return account, self._issue(account)

    async def refresh(self, refresh_token: str) -> tuple[Any, TokenPair]:
        actor = decode_token(refresh_token, TokenType.REFRESH)
        if actor.type is not self.actor_type:
            raise UnauthorizedError(
                f"Refresh token does not belong to a {self.actor_type.value} account",
            )
        conditions = [self.model.id == actor.id, self.model.deleted_at.is_(None)]
        if hasattr(self.model, "status"):
            conditions.append(self.model.status == ACTIVE)
        account = await self.lifecycle.db.scalar(select(self.model).where(*conditions))
        if account is None:
            raise UnauthorizedError(
                "Account not found or inactive",
                context=ErrorContext(actor_id=str(actor.id)),
            )
        return account, self._issue(account)

    def _issue(self, account: Any) -> TokenPair:
        return issue_tokens(account.id, self.actor_type, self.lifecycle.stamps.now())
