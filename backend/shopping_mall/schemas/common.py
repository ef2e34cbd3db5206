"""Shared Schema Types — wire conventions reused by every request/response model.

Invariants:
    - Response datetimes render as ISO-8601 UTC with milliseconds and a trailing Z
    - Incoming datetimes are normalized to UTC before they reach a handler
    - Optional response fields are always present (null when absent)
    - PageRequest rejects page < 1 and limit < 1 at the boundary (400);
      null or missing page and limit fall back to the listing defaults

Design Decisions:
    - Annotated types (PlainSerializer / AfterValidator) over per-model validators:
      one definition, applied wherever the field type is used
    - ApiModel.from_attributes: responses are built straight from ORM rows
"""

from datetime import datetime
from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from shopping_mall.core.timestamps import as_utc, to_iso

T = TypeVar("T")

# Outbound: ORM datetime -> "2024-01-01T00:00:00.000Z"
Timestamp = Annotated[datetime, PlainSerializer(to_iso, return_type=str)]

# Inbound: any offset (or naive) -> aware UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

NonEmptyStr = Annotated[str, Field(min_length=1)]
Money = Annotated[float, Field(ge=0)]


class ApiModel(BaseModel):
    """Base for response DTOs read from ORM rows."""
    model_config = ConfigDict(from_attributes=True)


class EntityResponse(ApiModel):
    """Fields every stored entity exposes."""
    id: UUID
    created_at: Timestamp
    updated_at: Timestamp


class PageRequest(BaseModel):
    """Base body of every search (PATCH) endpoint."""
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)
    sort: str | None = None


class Pagination(BaseModel):
    current: int
    limit: int
    records: int
    pages: int


class Page(BaseModel, Generic[T]):
    pagination: Pagination
    data: list[T]


class SoftDeletableResponse(EntityResponse):
    deleted_at: Timestamp | None = None
