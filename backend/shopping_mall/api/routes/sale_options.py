"""Sale Option Routes — the shared option vocabulary (groups and options).

Invariants:
    - Group code and option code are each unique (pre-check → 409)
    - An option's group must be live when the option is created or moved
    - Admins and sellers get the same endpoints under their own prefix

Design Decisions:
    - build_router() registers one handler set per role instead of copying it
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, seller_actor
from shopping_mall.core.domain_types import Actor, ActorType
from shopping_mall.models.sales import SaleOption, SaleOptionGroup
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.sales import (
    SaleOptionCreate, SaleOptionGroupCreate, SaleOptionGroupResponse,
    SaleOptionGroupSearch, SaleOptionGroupUpdate, SaleOptionResponse,
    SaleOptionSearch, SaleOptionUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, contains, equals, search_any, search_page

GROUPS = Listing(SaleOptionGroup, frozenset({"created_at", "updated_at", "code", "name"}))
OPTIONS = Listing(SaleOption, frozenset({"created_at", "updated_at", "code", "name", "type"}))


def build_router(role: ActorType, require_actor) -> APIRouter:
    router = APIRouter(
        prefix=f"/shoppingMall/{role.route_segment}", tags=["sale options"],
    )

    # ─── Option groups ───────────────────────────────────────────

    @router.patch("/saleOptionGroups", response_model=Page[SaleOptionGroupResponse])
    async def search_groups(
        body: SaleOptionGroupSearch,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await search_page(
            lc.db, GROUPS, body,
            search_any((SaleOptionGroup.code, SaleOptionGroup.name), body.search),
            equals(SaleOptionGroup.code, body.code),
            contains(SaleOptionGroup.name, body.name),
            dto=SaleOptionGroupResponse,
        )

    @router.get("/saleOptionGroups/{group_id}", response_model=SaleOptionGroupResponse)
    async def get_group(
        group_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await lc.get_live(SaleOptionGroup, group_id)

    @router.post(
        "/saleOptionGroups", response_model=SaleOptionGroupResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_group(
        body: SaleOptionGroupCreate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.ensure_unique(SaleOptionGroup, "code", body.code)
        return await lc.create(SaleOptionGroup, **body.model_dump())

    @router.put("/saleOptionGroups/{group_id}", response_model=SaleOptionGroupResponse)
    async def update_group(
        group_id: UUID,
        body: SaleOptionGroupUpdate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        group = await lc.get_live(SaleOptionGroup, group_id)
        await lc.ensure_unique(SaleOptionGroup, "code", body.code, exclude_id=group.id)
        return await lc.update(group, body.model_dump(exclude_unset=True))

    @router.delete("/saleOptionGroups/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_group(
        group_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.remove(await lc.get_live(SaleOptionGroup, group_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # ─── Options ─────────────────────────────────────────────────

    @router.patch("/saleOptions", response_model=Page[SaleOptionResponse])
    async def search_options(
        body: SaleOptionSearch,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await search_page(
            lc.db, OPTIONS, body,
            equals(SaleOption.shopping_mall_sale_option_group_id,
                   body.shopping_mall_sale_option_group_id),
            equals(SaleOption.code, body.code),
            contains(SaleOption.name, body.name),
            equals(SaleOption.type, body.type),
            dto=SaleOptionResponse,
        )

    @router.get("/saleOptions/{option_id}", response_model=SaleOptionResponse)
    async def get_option(
        option_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await lc.get_live(SaleOption, option_id)

    @router.post(
        "/saleOptions", response_model=SaleOptionResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_option(
        body: SaleOptionCreate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.get_live(SaleOptionGroup, body.shopping_mall_sale_option_group_id)
        await lc.ensure_unique(SaleOption, "code", body.code)
        return await lc.create(SaleOption, **body.model_dump())

    @router.put("/saleOptions/{option_id}", response_model=SaleOptionResponse)
    async def update_option(
        option_id: UUID,
        body: SaleOptionUpdate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        option = await lc.get_live(SaleOption, option_id)
        if body.shopping_mall_sale_option_group_id is not None:
            await lc.get_live(SaleOptionGroup, body.shopping_mall_sale_option_group_id)
        await lc.ensure_unique(SaleOption, "code", body.code, exclude_id=option.id)
        return await lc.update(option, body.model_dump(exclude_unset=True))

    @router.delete("/saleOptions/{option_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_option(
        option_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.remove(await lc.get_live(SaleOption, option_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


admin_router = build_router(ActorType.ADMIN, admin_actor)
seller_router = build_router(ActorType.SELLER, seller_actor)
