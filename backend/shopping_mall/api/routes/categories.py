"""Category Routes — admin management of categories, parent/child links and channel assignments.

Invariants:
    - category.code is unique
    - Relations are created under their parent category and can be listed or
      re-pointed from either end; a category is never related to itself
    - Relations are hard-deleted; channel-category links are soft-deleted
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.api.dependencies import admin_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import ValidationFailedError
from shopping_mall.infrastructure.database import get_db
from shopping_mall.models.catalog import (
    Category, CategoryRelation, Channel, ChannelCategory,
)
from shopping_mall.schemas.catalog import (
    CategoryCreate, CategoryRelationCreate, CategoryRelationResponse,
    CategoryRelationSearch, CategoryRelationUpdate, CategoryResponse, CategorySearch,
    CategoryUpdate,
    ChannelCategoryCreate, ChannelCategoryResponse, ChannelCategorySearch,
)
from shopping_mall.schemas.common import Page
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, contains, equals, search_any, search_page

router = APIRouter(prefix="/shoppingMall/adminUser", tags=["categories"])

CATEGORIES = Listing(Category, frozenset({"created_at", "updated_at", "code", "name", "status"}))
RELATIONS = Listing(CategoryRelation, frozenset({"created_at", "updated_at"}))
CHANNEL_CATEGORIES = Listing(ChannelCategory, frozenset({"created_at", "updated_at"}))


@router.patch("/categories", response_model=Page[CategoryResponse])
async def search_categories(
    body: CategorySearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, CATEGORIES, body,
        search_any((Category.code, Category.name), body.search),
        equals(Category.code, body.code),
        contains(Category.name, body.name),
        equals(Category.status, body.status),
        dto=CategoryResponse,
    )


@router.get("/categories/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Category, category_id)


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.ensure_unique(Category, "code", body.code)
    return await lc.create(Category, **body.model_dump())


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    category = await lc.get_live(Category, category_id)
    await lc.ensure_unique(Category, "code", body.code, exclude_id=category.id)
    return await lc.update(category, body.model_dump(exclude_unset=True))


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Category, category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Category relations ──────────────────────────────────────────

async def _repoint(
    lc: Lifecycle, relation: CategoryRelation, end: str, target_id: UUID | None,
) -> CategoryRelation:
    """Move one end of a relation to another live category."""
    if target_id is None:
        return await lc.update(relation, {})
    fixed = (
        relation.parent_category_id if end == "child_category_id"
        else relation.child_category_id
    )
    if target_id == fixed:
        raise ValidationFailedError("A category cannot be related to itself", field=end)
    await lc.get_live(Category, target_id)
    return await lc.update(relation, {end: target_id})


@router.patch(
    "/categories/{category_id}/categoryRelations/child",
    response_model=Page[CategoryRelationResponse],
)
async def search_child_relations(
    category_id: UUID,
    body: CategoryRelationSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Category, category_id)
    return await search_page(
        lc.db, RELATIONS, body,
        equals(CategoryRelation.parent_category_id, category_id),
        equals(CategoryRelation.child_category_id, body.child_category_id),
        dto=CategoryRelationResponse,
    )


@router.post(
    "/categories/{category_id}/categoryRelations/child",
    response_model=CategoryRelationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_child_relation(
    category_id: UUID,
    body: CategoryRelationCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    if body.child_category_id == category_id:
        raise ValidationFailedError(
            "A category cannot be its own child", field="child_category_id",
        )
    await lc.get_live(Category, category_id)
    await lc.get_live(Category, body.child_category_id)
    return await lc.create(
        CategoryRelation,
        parent_category_id=category_id,
        child_category_id=body.child_category_id,
    )


@router.delete(
    "/categories/{category_id}/categoryRelations/child/{relation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_child_relation(
    category_id: UUID,
    relation_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    relation = await lc.get_live(
        CategoryRelation, relation_id,
        CategoryRelation.parent_category_id == category_id,
    )
    await lc.remove(relation)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/categories/{category_id}/categoryRelations/child/{relation_id}",
    response_model=CategoryRelationResponse,
)
async def update_child_relation(
    category_id: UUID,
    relation_id: UUID,
    body: CategoryRelationUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    relation = await lc.get_live(
        CategoryRelation, relation_id,
        CategoryRelation.parent_category_id == category_id,
    )
    return await _repoint(lc, relation, "child_category_id", body.child_category_id)


@router.patch(
    "/categories/{category_id}/categoryRelations/parent",
    response_model=Page[CategoryRelationResponse],
)
async def search_parent_relations(
    category_id: UUID,
    body: CategoryRelationSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Category, category_id)
    return await search_page(
        lc.db, RELATIONS, body,
        equals(CategoryRelation.child_category_id, category_id),
        equals(CategoryRelation.parent_category_id, body.parent_category_id),
        dto=CategoryRelationResponse,
    )


@router.put(
    "/categories/{category_id}/categoryRelations/parent/{relation_id}",
    response_model=CategoryRelationResponse,
)
async def update_parent_relation(
    category_id: UUID,
    relation_id: UUID,
    body: CategoryRelationUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    relation = await lc.get_live(
        CategoryRelation, relation_id,
        CategoryRelation.child_category_id == category_id,
    )
    return await _repoint(lc, relation, "parent_category_id", body.parent_category_id)


# ─── Channel categories ──────────────────────────────────────────

@router.patch("/channelCategories", response_model=Page[ChannelCategoryResponse])
async def search_channel_categories(
    body: ChannelCategorySearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, CHANNEL_CATEGORIES, body,
        equals(ChannelCategory.shopping_mall_channel_id, body.shopping_mall_channel_id),
        equals(ChannelCategory.shopping_mall_category_id, body.shopping_mall_category_id),
        dto=ChannelCategoryResponse,
    )


@router.get("/channelCategories/{link_id}", response_model=ChannelCategoryResponse)
async def get_channel_category(
    link_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(ChannelCategory, link_id)


@router.post(
    "/channelCategories", response_model=ChannelCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_channel_category(
    body: ChannelCategoryCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Channel, body.shopping_mall_channel_id)
    await lc.get_live(Category, body.shopping_mall_category_id)
    return await lc.create(ChannelCategory, **body.model_dump())


@router.delete("/channelCategories/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_channel_category(
    link_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(ChannelCategory, link_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
