"""Cart Routes — member carts, cart items and item options; admin read access to items.

Invariants:
    - "My carts" search always filters on the caller's member id
    - A cart item is reachable only under its own live cart, owned by the caller
    - Cart item options are owned through item → cart; they are hard-deleted
    - Deleting the same cart item twice → 404 on the second call
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, member_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.models.carts import Cart, CartItem, CartItemOption
from shopping_mall.models.sales import SaleOption, SaleSnapshot
from shopping_mall.schemas.carts import (
    CartCreate, CartItemCreate, CartItemOptionCreate, CartItemOptionResponse,
    CartItemOptionSearch, CartItemOptionUpdate, CartItemResponse, CartItemSearch,
    CartItemUpdate, CartResponse, CartSearch, CartUpdate,
)
from shopping_mall.schemas.common import Page
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import (
    Listing, at_least, at_most, contains, equals, search_page,
)

member_router = APIRouter(prefix="/shoppingMall/memberUser", tags=["carts"])
admin_router = APIRouter(prefix="/shoppingMall/adminUser", tags=["carts"])

CARTS = Listing(Cart, frozenset({"created_at", "updated_at", "status"}))
CART_ITEMS = Listing(
    CartItem, frozenset({"created_at", "updated_at", "quantity", "unit_price", "status"}),
)
CART_ITEM_OPTIONS = Listing(CartItemOption, frozenset({"created_at", "updated_at", "value"}))


async def _owned_cart(lc: Lifecycle, cart_id: UUID, actor: Actor) -> Cart:
    cart = await lc.get_live(Cart, cart_id)
    ensure_owner(cart.member_user_id, actor, "cart")
    return cart


async def _owned_cart_item(lc: Lifecycle, cart_item_id: UUID, actor: Actor) -> CartItem:
    item = await lc.get_live(CartItem, cart_item_id)
    await _owned_cart(lc, item.shopping_cart_id, actor)
    return item


def _cart_item_predicates(body: CartItemSearch):
    return (
        equals(CartItem.shopping_sale_snapshot_id, body.shopping_sale_snapshot_id),
        equals(CartItem.status, body.status),
        at_least(CartItem.quantity, body.min_quantity),
        at_most(CartItem.quantity, body.max_quantity),
    )


# ─── Carts ───────────────────────────────────────────────────────

@member_router.patch("/carts", response_model=Page[CartResponse])
async def search_carts(
    body: CartSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, CARTS, body,
        equals(Cart.member_user_id, actor.id),
        equals(Cart.member_user_id, body.member_user_id),
        equals(Cart.status, body.status),
        dto=CartResponse,
    )


@member_router.get("/carts/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _owned_cart(lc, cart_id, actor)


@member_router.post("/carts", response_model=CartResponse, status_code=status.HTTP_201_CREATED)
async def create_cart(
    body: CartCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.create(Cart, member_user_id=actor.id, **body.model_dump())


@member_router.put("/carts/{cart_id}", response_model=CartResponse)
async def update_cart(
    cart_id: UUID,
    body: CartUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    cart = await _owned_cart(lc, cart_id, actor)
    return await lc.update(cart, body.model_dump(exclude_unset=True))


@member_router.delete("/carts/{cart_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cart(
    cart_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await _owned_cart(lc, cart_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Cart items ──────────────────────────────────────────────────

@member_router.patch("/carts/{cart_id}/cartItems", response_model=Page[CartItemResponse])
async def search_cart_items(
    cart_id: UUID,
    body: CartItemSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart(lc, cart_id, actor)
    return await search_page(
        lc.db, CART_ITEMS, body,
        equals(CartItem.shopping_cart_id, cart_id),
        *_cart_item_predicates(body),
        dto=CartItemResponse,
    )


@member_router.get("/carts/{cart_id}/cartItems/{cart_item_id}", response_model=CartItemResponse)
async def get_cart_item(
    cart_id: UUID,
    cart_item_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart(lc, cart_id, actor)
    return await lc.get_live(CartItem, cart_item_id, CartItem.shopping_cart_id == cart_id)


@member_router.post(
    "/carts/{cart_id}/cartItems", response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cart_item(
    cart_id: UUID,
    body: CartItemCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart(lc, cart_id, actor)
    await lc.get_live(SaleSnapshot, body.shopping_sale_snapshot_id)
    return await lc.create(CartItem, shopping_cart_id=cart_id, **body.model_dump())


@member_router.put("/carts/{cart_id}/cartItems/{cart_item_id}", response_model=CartItemResponse)
async def update_cart_item(
    cart_id: UUID,
    cart_item_id: UUID,
    body: CartItemUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart(lc, cart_id, actor)
    item = await lc.get_live(CartItem, cart_item_id, CartItem.shopping_cart_id == cart_id)
    return await lc.update(item, body.model_dump(exclude_unset=True))


@member_router.delete(
    "/carts/{cart_id}/cartItems/{cart_item_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_cart_item(
    cart_id: UUID,
    cart_item_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart(lc, cart_id, actor)
    await lc.remove(
        await lc.get_live(CartItem, cart_item_id, CartItem.shopping_cart_id == cart_id),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Cart item options ───────────────────────────────────────────

@member_router.patch(
    "/cartItems/{cart_item_id}/cartItemOptions",
    response_model=Page[CartItemOptionResponse],
)
async def search_cart_item_options(
    cart_item_id: UUID,
    body: CartItemOptionSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart_item(lc, cart_item_id, actor)
    return await search_page(
        lc.db, CART_ITEM_OPTIONS, body,
        equals(CartItemOption.shopping_cart_item_id, cart_item_id),
        equals(CartItemOption.shopping_sale_option_id, body.shopping_sale_option_id),
        contains(CartItemOption.value, body.value),
        dto=CartItemOptionResponse,
    )


@member_router.get(
    "/cartItems/{cart_item_id}/cartItemOptions/{option_id}",
    response_model=CartItemOptionResponse,
)
async def get_cart_item_option(
    cart_item_id: UUID,
    option_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart_item(lc, cart_item_id, actor)
    return await lc.get_live(
        CartItemOption, option_id, CartItemOption.shopping_cart_item_id == cart_item_id,
    )


@member_router.post(
    "/cartItems/{cart_item_id}/cartItemOptions",
    response_model=CartItemOptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cart_item_option(
    cart_item_id: UUID,
    body: CartItemOptionCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart_item(lc, cart_item_id, actor)
    await lc.get_live(SaleOption, body.shopping_sale_option_id)
    return await lc.create(
        CartItemOption, shopping_cart_item_id=cart_item_id, **body.model_dump(),
    )


@member_router.put(
    "/cartItems/{cart_item_id}/cartItemOptions/{option_id}",
    response_model=CartItemOptionResponse,
)
async def update_cart_item_option(
    cart_item_id: UUID,
    option_id: UUID,
    body: CartItemOptionUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart_item(lc, cart_item_id, actor)
    option = await lc.get_live(
        CartItemOption, option_id, CartItemOption.shopping_cart_item_id == cart_item_id,
    )
    return await lc.update(option, body.model_dump(exclude_unset=True))


@member_router.delete(
    "/cartItems/{cart_item_id}/cartItemOptions/{option_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_cart_item_option(
    cart_item_id: UUID,
    option_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await _owned_cart_item(lc, cart_item_id, actor)
    option = await lc.get_live(
        CartItemOption, option_id, CartItemOption.shopping_cart_item_id == cart_item_id,
    )
    await lc.remove(option)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Admin ───────────────────────────────────────────────────────

@admin_router.patch("/carts/{cart_id}/cartItems", response_model=Page[CartItemResponse])
async def admin_search_cart_items(
    cart_id: UUID,
    body: CartItemSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Cart, cart_id)
    return await search_page(
        lc.db, CART_ITEMS, body,
        equals(CartItem.shopping_cart_id, cart_id),
        *_cart_item_predicates(body),
        dto=CartItemResponse,
    )
