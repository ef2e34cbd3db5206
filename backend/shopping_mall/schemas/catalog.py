"""Catalog Schemas — channels, sections, categories, category links."""

from uuid import UUID

from pydantic import BaseModel

from shopping_mall.schemas.common import (
    EntityResponse, NonEmptyStr, PageRequest, SoftDeletableResponse,
)


# ─── Channel ─────────────────────────────────────────────────────

class ChannelCreate(BaseModel):
    code: NonEmptyStr
    name: NonEmptyStr
    description: str | None = None
    status: NonEmptyStr


class ChannelUpdate(BaseModel):
    code: NonEmptyStr | None = None
    name: NonEmptyStr | None = None
    description: str | None = None
    status: NonEmptyStr | None = None


class ChannelSearch(PageRequest):
    search: str | None = None
    code: str | None = None
    name: str | None = None
    status: str | None = None


class ChannelResponse(SoftDeletableResponse):
    code: str
    name: str
    description: str | None
    status: str


# ─── Section ─────────────────────────────────────────────────────

class SectionCreate(BaseModel):
    code: NonEmptyStr
    name: NonEmptyStr
    description: str | None = None
    status: NonEmptyStr


class SectionUpdate(ChannelUpdate):
    pass


class SectionSearch(PageRequest):
    code: str | None = None
    name: str | None = None
    status: str | None = None


class SectionResponse(SoftDeletableResponse):
    shopping_mall_channel_id: UUID
    code: str
    name: str
    description: str | None
    status: str


# ─── Category ────────────────────────────────────────────────────

class CategoryCreate(ChannelCreate):
    pass


class CategoryUpdate(ChannelUpdate):
    pass


class CategorySearch(ChannelSearch):
    pass


class CategoryResponse(ChannelResponse):
    pass


class CategoryRelationCreate(BaseModel):
    child_category_id: UUID


class CategoryRelationSearch(PageRequest):
    parent_category_id: UUID | None = None
    child_category_id: UUID | None = None


class CategoryRelationUpdate(BaseModel):
    """Re-point one end of a relation; the end fixed by the path is not editable."""
    parent_category_id: UUID | None = None
    child_category_id: UUID | None = None


class CategoryRelationResponse(EntityResponse):
    parent_category_id: UUID
    child_category_id: UUID


# ─── Channel ↔ Category ──────────────────────────────────────────

class ChannelCategoryCreate(BaseModel):
    shopping_mall_channel_id: UUID
    shopping_mall_category_id: UUID


class ChannelCategorySearch(PageRequest):
    shopping_mall_channel_id: UUID | None = None
    shopping_mall_category_id: UUID | None = None


class ChannelCategoryResponse(SoftDeletableResponse):
    shopping_mall_channel_id: UUID
    shopping_mall_category_id: UUID
