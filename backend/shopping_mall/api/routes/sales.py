"""Sale Routes — seller-owned listings and their units; admin oversight of all sales.

Invariants:
    - A seller only sees and mutates sales whose shopping_mall_seller_user_id is theirs
    - Creating a sale for another seller id is Forbidden
    - A sale's section, on create or update, is a live section of the sale's channel
    - Sale units are owned through their sale
    - Admin search can include soft-deleted sales (deleted = "deleted" | "all")
    - Every create or update of a sale appends one immutable snapshot of it
    - Snapshots and sale unit options are reached only under their own sale
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, seller_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import ErrorContext, ForbiddenError
from shopping_mall.models.catalog import Channel, Section
from shopping_mall.models.sales import (
    Sale, SaleOption, SaleSnapshot, SaleUnit, SaleUnitOption,
)
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.sales import (
    AdminSaleSearch, SaleCreate, SaleResponse, SaleSearch, SaleSnapshotResponse,
    SaleSnapshotSearch, SaleUnitCreate, SaleUnitOptionCreate, SaleUnitOptionResponse,
    SaleUnitOptionSearch, SaleUnitOptionUpdate, SaleUnitResponse, SaleUnitSearch,
    SaleUnitUpdate, SaleUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import (
    Listing, at_least, at_most, contains, equals, one_of, search_any, search_page,
)

admin_router = APIRouter(prefix="/shoppingMall/adminUser/sales", tags=["sales"])
seller_router = APIRouter(prefix="/shoppingMall/sellerUser/sales", tags=["sales"])

SALES = Listing(
    Sale, frozenset({"created_at", "updated_at", "code", "name", "price", "status"}),
)
SALE_UNITS = Listing(SaleUnit, frozenset({"created_at", "updated_at", "name", "status"}))
SNAPSHOTS = Listing(SaleSnapshot, frozenset({"created_at", "price"}))
UNIT_OPTIONS = Listing(
    SaleUnitOption,
    frozenset({"created_at", "updated_at", "additional_price", "stock_quantity"}),
)


def _sale_predicates(body: SaleSearch):
    return (
        search_any((Sale.code, Sale.name), body.search),
        equals(Sale.code, body.code),
        equals(Sale.status, body.status),
        equals(Sale.shopping_mall_channel_id, body.shopping_mall_channel_id),
        equals(Sale.shopping_mall_section_id, body.shopping_mall_section_id),
        at_least(Sale.price, body.min_price),
        at_most(Sale.price, body.max_price),
    )


async def _owned_sale(lc: Lifecycle, sale_id: UUID, actor: Actor) -> Sale:
    sale = await lc.get_live(Sale, sale_id)
    ensure_owner(sale.shopping_mall_seller_user_id, actor, "sale")
    return sale


async def _record_snapshot(lc: Lifecycle, sale: Sale) -> SaleSnapshot:
    return await lc.create(
        SaleSnapshot,
        shopping_mall_sale_id=sale.id,
        code=sale.code, status=sale.status, name=sale.name,
        description=sale.description, price=sale.price,
    )


async def _apply_update(lc: Lifecycle, sale: Sale, body: SaleUpdate) -> Sale:
    if body.shopping_mall_section_id is not None:
        await lc.get_live(
            Section, body.shopping_mall_section_id,
            Section.shopping_mall_channel_id == sale.shopping_mall_channel_id,
        )
    await lc.ensure_unique(Sale, "code", body.code, exclude_id=sale.id)
    sale = await lc.update(sale, body.model_dump(exclude_unset=True))
    await _record_snapshot(lc, sale)
    return sale


async def _search_snapshots(lc: Lifecycle, sale_id: UUID, body: SaleSnapshotSearch):
    return await search_page(
        lc.db, SNAPSHOTS, body,
        equals(SaleSnapshot.shopping_mall_sale_id, sale_id),
        search_any(
            (SaleSnapshot.code, SaleSnapshot.name, SaleSnapshot.description), body.search,
        ),
        one_of(SaleSnapshot.status, body.statuses),
        at_least(SaleSnapshot.created_at, body.created_from),
        at_most(SaleSnapshot.created_at, body.created_to),
        at_least(SaleSnapshot.price, body.min_price),
        at_most(SaleSnapshot.price, body.max_price),
        dto=SaleSnapshotResponse,
    )


async def _search_unit_options(lc: Lifecycle, unit_id: UUID, body: SaleUnitOptionSearch):
    return await search_page(
        lc.db, UNIT_OPTIONS, body,
        equals(SaleUnitOption.shopping_mall_sale_unit_id, unit_id),
        equals(SaleUnitOption.shopping_mall_sale_option_id, body.shopping_mall_sale_option_id),
        dto=SaleUnitOptionResponse,
    )


def _unit_option(option_id: UUID, unit_id: UUID):
    return (
        SaleUnitOption, option_id,
        SaleUnitOption.shopping_mall_sale_unit_id == unit_id,
    )


# ─── Admin ───────────────────────────────────────────────────────

@admin_router.patch("", response_model=Page[SaleResponse])
async def admin_search_sales(
    body: AdminSaleSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, SALES, body,
        *_sale_predicates(body),
        equals(Sale.shopping_mall_seller_user_id, body.shopping_mall_seller_user_id),
        dto=SaleResponse,
        deleted=body.deleted,
    )


@admin_router.get("/{sale_id}", response_model=SaleResponse)
async def admin_get_sale(
    sale_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Sale, sale_id)


@admin_router.put("/{sale_id}", response_model=SaleResponse)
async def admin_update_sale(
    sale_id: UUID,
    body: SaleUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _apply_update(lc, await lc.get_live(Sale, sale_id), body)


@admin_router.patch("/{sale_id}/snapshots", response_model=Page[SaleSnapshotResponse])
async def admin_search_snapshots(
    sale_id: UUID,
    body: SaleSnapshotSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Sale, sale_id)
    return await _search_snapshots(lc, sale_id, body)


@admin_router.get(
    "/{sale_id}/snapshots/{snapshot_id}", response_model=SaleSnapshotResponse,
)
async def admin_get_snapshot(
    sale_id: UUID,
    snapshot_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Sale, sale_id)
    return await lc.get_live(
        SaleSnapshot, snapshot_id, SaleSnapshot.shopping_mall_sale_id == sale_id,
    )


@admin_router.patch(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions",
    response_model=Page[SaleUnitOptionResponse],
)
async def admin_search_unit_options(
    sale_id: UUID,
    unit_id: UUID,
    body: SaleUnitOptionSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Sale, sale_id)
    await lc.get_live(SaleUnit, unit_id, SaleUnit.shopping_mall_sale_id == sale_id)
    return await _search_unit_options(lc, unit_id, body)


@admin_router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_sale(
    sale_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Sale, sale_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Seller ──────────────────────────────────────────────────────

@seller_router.patch("", response_model=Page[SaleResponse])
async def seller_search_sales(
    body: SaleSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, SALES, body,
        equals(Sale.shopping_mall_seller_user_id, actor.id),
        *_sale_predicates(body),
        dto=SaleResponse,
    )


@seller_router.get("/{sale_id}", response_model=SaleResponse)
async def seller_get_sale(
    sale_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _owned_sale(lc, sale_id, actor)


@seller_router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def seller_create_sale(
    body: SaleCreate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    if body.shopping_mall_seller_user_id != actor.id:
        raise ForbiddenError(
            "Sales can only be created for your own seller account",
            context=ErrorContext(resource="Sale", actor_id=str(actor.id)),
        )
    await lc.get_live(Channel, body.shopping_mall_channel_id)
    if body.shopping_mall_section_id is not None:
        await lc.get_live(
            Section, body.shopping_mall_section_id,
            Section.shopping_mall_channel_id == body.shopping_mall_channel_id,
        )
    await lc.ensure_unique(Sale, "code", body.code)
    sale = await lc.create(Sale, **body.model_dump())
    await _record_snapshot(lc, sale)
    return sale


@seller_router.put("/{sale_id}", response_model=SaleResponse)
async def seller_update_sale(
    sale_id: UUID,
    body: SaleUpdate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _apply_update(lc, await _owned_sale(lc, sale_id, actor), body)


@seller_router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def seller_delete_sale(
    sale_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await _owned_sale(lc, sale_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Seller: sale units ──────────────────────────────────────────

@seller_router.patch("/{sale_id}/saleUnits", response_model=Page[SaleUnitResponse])
async def search_sale_units(
    sale_id: UUID,
    body: SaleUnitSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    return await search_page(
        lc.db, SALE_UNITS, body,
        equals(SaleUnit.shopping_mall_sale_id, sale_id),
        contains(SaleUnit.name, body.name),
        equals(SaleUnit.status, body.status),
        dto=SaleUnitResponse,
    )


@seller_router.get("/{sale_id}/saleUnits/{unit_id}", response_model=SaleUnitResponse)
async def get_sale_unit(
    sale_id: UUID,
    unit_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    return await lc.get_live(SaleUnit, unit_id, SaleUnit.shopping_mall_sale_id == sale_id)


@seller_router.post(
    "/{sale_id}/saleUnits", response_model=SaleUnitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_sale_unit(
    sale_id: UUID,
    body: SaleUnitCreate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    return await lc.create(SaleUnit, shopping_mall_sale_id=sale_id, **body.model_dump())


@seller_router.put("/{sale_id}/saleUnits/{unit_id}", response_model=SaleUnitResponse)
async def update_sale_unit(
    sale_id: UUID,
    unit_id: UUID,
    body: SaleUnitUpdate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    unit = await lc.get_live(SaleUnit, unit_id, SaleUnit.shopping_mall_sale_id == sale_id)
    return await lc.update(unit, body.model_dump(exclude_unset=True))


@seller_router.delete(
    "/{sale_id}/saleUnits/{unit_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_sale_unit(
    sale_id: UUID,
    unit_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    await lc.remove(
        await lc.get_live(SaleUnit, unit_id, SaleUnit.shopping_mall_sale_id == sale_id),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Seller: snapshots ───────────────────────────────────────────

@seller_router.patch("/{sale_id}/snapshots", response_model=Page[SaleSnapshotResponse])
async def seller_search_snapshots(
    sale_id: UUID,
    body: SaleSnapshotSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    return await _search_snapshots(lc, sale_id, body)


@seller_router.get(
    "/{sale_id}/snapshots/{snapshot_id}", response_model=SaleSnapshotResponse,
)
async def seller_get_snapshot(
    sale_id: UUID,
    snapshot_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_sale(lc, sale_id, actor)
    return await lc.get_live(
        SaleSnapshot, snapshot_id, SaleSnapshot.shopping_mall_sale_id == sale_id,
    )


# ─── Seller: sale unit options ───────────────────────────────────

async def _owned_unit(lc: Lifecycle, sale_id: UUID, unit_id: UUID, actor: Actor) -> SaleUnit:
    await _owned_sale(lc, sale_id, actor)
    return await lc.get_live(SaleUnit, unit_id, SaleUnit.shopping_mall_sale_id == sale_id)


@seller_router.patch(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions",
    response_model=Page[SaleUnitOptionResponse],
)
async def seller_search_unit_options(
    sale_id: UUID,
    unit_id: UUID,
    body: SaleUnitOptionSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_unit(lc, sale_id, unit_id, actor)
    return await _search_unit_options(lc, unit_id, body)


@seller_router.get(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions/{option_id}",
    response_model=SaleUnitOptionResponse,
)
async def get_unit_option(
    sale_id: UUID,
    unit_id: UUID,
    option_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_unit(lc, sale_id, unit_id, actor)
    return await lc.get_live(*_unit_option(option_id, unit_id))


@seller_router.post(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions",
    response_model=SaleUnitOptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_unit_option(
    sale_id: UUID,
    unit_id: UUID,
    body: SaleUnitOptionCreate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_unit(lc, sale_id, unit_id, actor)
    await lc.get_live(SaleOption, body.shopping_mall_sale_option_id)
    return await lc.create(
        SaleUnitOption, shopping_mall_sale_unit_id=unit_id, **body.model_dump(),
    )


@seller_router.put(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions/{option_id}",
    response_model=SaleUnitOptionResponse,
)
async def update_unit_option(
    sale_id: UUID,
    unit_id: UUID,
    option_id: UUID,
    body: SaleUnitOptionUpdate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_unit(lc, sale_id, unit_id, actor)
    option = await lc.get_live(*_unit_option(option_id, unit_id))
    if body.shopping_mall_sale_option_id is not None:
        await lc.get_live(SaleOption, body.shopping_mall_sale_option_id)
    return await lc.update(option, body.model_dump(exclude_unset=True))


@seller_router.delete(
    "/{sale_id}/saleUnits/{unit_id}/saleUnitOptions/{option_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_unit_option(
    sale_id: UUID,
    unit_id: UUID,
    option_id: UUID,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_unit(lc, sale_id, unit_id, actor)
    await lc.remove(await lc.get_live(*_unit_option(option_id, unit_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
