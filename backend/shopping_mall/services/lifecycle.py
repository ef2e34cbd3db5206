"""Lifecycle — lookup, authorize, mutate: the shared path of every write endpoint.

Invariants:
    - get_live() never returns a soft-deleted row or one outside the given scope
    - create() stamps id, created_at, updated_at from the injected Stamps
    - update() applies only explicitly-sent fields and refreshes updated_at
    - remove() soft-deletes when the model has deleted_at, else hard-deletes;
      removing the same id twice fails with ResourceNotFoundError
    - Writes commit through database.commit(), so constraint violations are 409s
    - Every mutation logs one INFO line naming resource and id

Design Decisions:
    - Nullable columns are read from the mapped table, so update payloads need
      no per-schema nullability list
    - No status-transition guard: any status string may replace another
"""

import logging
from typing import Any, Mapping, TypeVar
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.core.capabilities import Stamps
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import (
    ConflictError, ErrorContext, ForbiddenError, ResourceNotFoundError,
)
from shopping_mall.core.patch import cleared_fields, sparse_patch
from shopping_mall.db.base import has_soft_delete
from shopping_mall.infrastructure.clock import get_stamps
from shopping_mall.infrastructure.database import commit, get_db

logger = logging.getLogger(__name__)

M = TypeVar("M")


def nullable_columns(model: type) -> frozenset[str]:
    return frozenset(c.name for c in model.__table__.columns if c.nullable)


def ensure_owner(owner_id: UUID | None, actor: Actor, resource: str = "resource") -> None:
    """Raise ForbiddenError unless the actor is the owner."""
    if not actor.owns(owner_id):
        raise ForbiddenError(
            f"You can only access your own {resource}",
            context=ErrorContext(resource=resource, actor_id=str(actor.id)),
        )


class Lifecycle:
    """Mutation helpers bound to one request's session and capabilities."""

    def __init__(self, db: AsyncSession, stamps: Stamps):
        self.db = db
        self.stamps = stamps

    async def get_live(self, model: type[M], entity_id: UUID, *scope) -> M:
        """Fetch a live row by id, optionally constrained to a parent scope."""
        conditions = [model.id == entity_id, *scope]
        if has_soft_delete(model):
            conditions.append(model.deleted_at.is_(None))
        entity = await self.db.scalar(select(model).where(*conditions))
        if entity is None:
            raise ResourceNotFoundError(model.__name__, str(entity_id))
        return entity

    async def ensure_unique(
        self, model: type, column_name: str, value: Any,
        exclude_id: UUID | None = None,
    ) -> None:
        """Pre-check a unique column (soft-deleted rows still hold their value)."""
        if value is None:
            return
        column = getattr(model, column_name)
        query = select(model.id).where(column == value)
        if exclude_id is not None:
            query = query.where(model.id != exclude_id)
        if await self.db.scalar(query.limit(1)) is not None:
            raise ConflictError(
                f"{model.__name__} with {column_name} '{value}' already exists",
                field=column_name,
                context=ErrorContext(resource=model.__name__),
            )

    async def create(self, model: type[M], **fields: Any) -> M:
        now = self.stamps.now()
        entity = model(
            id=self.stamps.new_id(), created_at=now, updated_at=now, **fields,
        )
        if has_soft_delete(model):
            entity.deleted_at = None
        self.db.add(entity)
        await commit(self.db, model.__name__)
        logger.info(
            f"Created {model.__name__}",
            extra={"resource": model.__name__, "resource_id": entity.id},
        )
        return entity

    async def update(self, entity: M, provided: Mapping[str, Any]) -> M:
        """Apply a sparse patch (the request's exclude_unset dump)."""
        model = type(entity)
        patch = sparse_patch(provided, nullable=nullable_columns(model))
        for name, value in patch.items():
            setattr(entity, name, value)
        entity.updated_at = self.stamps.now()
        await commit(self.db, model.__name__)
        logger.info(
            f"Updated {model.__name__} ({', '.join(patch) or 'no fields'})",
            extra={
                "resource": model.__name__,
                "resource_id": entity.id,
                "cleared": cleared_fields(patch),
            },
        )
        return entity

    async def remove(self, entity: Any) -> None:
        model = type(entity)
        entity_id = entity.id
        if has_soft_delete(model):
            now = self.stamps.now()
            entity.deleted_at = now
            entity.updated_at = now
            action = "Soft-deleted"
        else:
            await self.db.delete(entity)
            action = "Deleted"
        await commit(self.db, model.__name__)
        logger.info(
            f"{action} {model.__name__}",
            extra={"resource": model.__name__, "resource_id": entity_id},
        )


def get_lifecycle(
    db: AsyncSession = Depends(get_db), stamps: Stamps = Depends(get_stamps),
) -> Lifecycle:
    """FastAPI dependency — shares the request's session with search handlers."""
    return Lifecycle(db, stamps)
