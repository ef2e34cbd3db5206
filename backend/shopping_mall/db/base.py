"""SQLAlchemy Declarative Base — shared base class and column mixins for all ORM models.

Invariants:
    - All models inherit from Base
    - Every table has id, created_at, updated_at; SoftDeleteMixin adds deleted_at
    - Timestamps are assigned by the mutation helpers from the injected clock,
      not by column defaults

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - has_soft_delete() decides soft vs hard delete, so delete handlers need
      no per-entity flag
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all marketplace ORM models."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )


class SoftDeleteMixin:
    """Rows are removed logically by stamping deleted_at."""

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None,
    )


def has_soft_delete(model: type) -> bool:
    return issubclass(model, SoftDeleteMixin)
