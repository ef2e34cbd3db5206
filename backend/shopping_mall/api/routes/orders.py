"""Order Routes — member and guest orders, order items, admin oversight.

Invariants:
    - A member order is created with member_user_id = caller (body value ignored);
      a guest order with guest_user_id = caller
    - order_code is unique
    - Members and guests only reach their own orders (403 otherwise)
    - A seller reaches an order only through items priced from their own sales,
      and only sees or edits those items
    - An order item names an existing sale snapshot
    - Updates are sparse: omitted status fields keep their value
    - No status-transition guard
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select

from shopping_mall.api.dependencies import (
    admin_actor, guest_actor, member_actor, seller_actor,
)
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import ErrorContext, ForbiddenError
from shopping_mall.models.orders import Order, OrderItem
from shopping_mall.models.sales import Sale, SaleSnapshot
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.orders import (
    AdminOrderSearch, OrderCreate, OrderItemCreate, OrderItemResponse,
    OrderItemSearch, OrderItemUpdate, OrderResponse, OrderSearch, OrderUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import Listing, at_least, at_most, equals, search_page

member_router = APIRouter(prefix="/shoppingMall/memberUser/orders", tags=["orders"])
guest_router = APIRouter(prefix="/shoppingMall/guestUser/orders", tags=["orders"])
seller_router = APIRouter(prefix="/shoppingMall/sellerUser/orders", tags=["orders"])
admin_router = APIRouter(prefix="/shoppingMall/adminUser/orders", tags=["orders"])

ORDERS = Listing(
    Order,
    frozenset({
        "created_at", "updated_at", "order_code", "order_status",
        "payment_status", "total_price",
    }),
)
ORDER_ITEMS = Listing(
    OrderItem, frozenset({"created_at", "updated_at", "quantity", "price"}),
)


def _order_predicates(body: OrderSearch):
    return (
        equals(Order.order_code, body.order_code),
        equals(Order.order_status, body.order_status),
        equals(Order.payment_status, body.payment_status),
        equals(Order.shopping_mall_channel_id, body.shopping_mall_channel_id),
        at_least(Order.total_price, body.min_total_price),
        at_most(Order.total_price, body.max_total_price),
    )


async def member_order(lc: Lifecycle, order_id: UUID, actor: Actor) -> Order:
    order = await lc.get_live(Order, order_id)
    ensure_owner(order.member_user_id, actor, "order")
    return order


async def guest_order(lc: Lifecycle, order_id: UUID, actor: Actor) -> Order:
    order = await lc.get_live(Order, order_id)
    ensure_owner(order.guest_user_id, actor, "order")
    return order


async def _create_order(lc: Lifecycle, body: OrderCreate, **owner) -> Order:
    await lc.ensure_unique(Order, "order_code", body.order_code)
    fields = body.model_dump(exclude={"member_user_id", "guest_user_id"})
    return await lc.create(Order, **fields, **owner)


# ─── Member ──────────────────────────────────────────────────────

@member_router.patch("", response_model=Page[OrderResponse])
async def member_search_orders(
    body: OrderSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, ORDERS, body,
        equals(Order.member_user_id, actor.id),
        *_order_predicates(body),
        dto=OrderResponse,
    )


@member_router.get("/{order_id}", response_model=OrderResponse)
async def member_get_order(
    order_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await member_order(lc, order_id, actor)


@member_router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def member_create_order(
    body: OrderCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _create_order(lc, body, member_user_id=actor.id, guest_user_id=None)


@member_router.put("/{order_id}", response_model=OrderResponse)
async def member_update_order(
    order_id: UUID,
    body: OrderUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    order = await member_order(lc, order_id, actor)
    return await lc.update(order, body.model_dump(exclude_unset=True))


@member_router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def member_delete_order(
    order_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await member_order(lc, order_id, actor))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@member_router.patch("/{order_id}/items", response_model=Page[OrderItemResponse])
async def member_search_order_items(
    order_id: UUID,
    body: OrderItemSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    return await search_page(
        lc.db, ORDER_ITEMS, body,
        equals(OrderItem.shopping_mall_order_id, order_id),
        equals(OrderItem.order_item_status, body.order_item_status),
        equals(OrderItem.shopping_mall_sale_snapshot_id, body.shopping_mall_sale_snapshot_id),
        dto=OrderItemResponse,
    )


@member_router.get("/{order_id}/items/{item_id}", response_model=OrderItemResponse)
async def member_get_order_item(
    order_id: UUID,
    item_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    return await lc.get_live(OrderItem, item_id, OrderItem.shopping_mall_order_id == order_id)


@member_router.post(
    "/{order_id}/items", response_model=OrderItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def member_create_order_item(
    order_id: UUID,
    body: OrderItemCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    await lc.get_live(SaleSnapshot, body.shopping_mall_sale_snapshot_id)
    return await lc.create(OrderItem, shopping_mall_order_id=order_id, **body.model_dump())


# ─── Guest ───────────────────────────────────────────────────────

@guest_router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def guest_create_order(
    body: OrderCreate,
    actor: Actor = Depends(guest_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await _create_order(lc, body, member_user_id=None, guest_user_id=actor.id)


@guest_router.get("/{order_id}", response_model=OrderResponse)
async def guest_get_order(
    order_id: UUID,
    actor: Actor = Depends(guest_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await guest_order(lc, order_id, actor)


# ─── Seller ──────────────────────────────────────────────────────

def sold_by(seller_id: UUID):
    """Order items priced from a snapshot of one of the seller's sales."""
    return OrderItem.shopping_mall_sale_snapshot_id.in_(
        select(SaleSnapshot.id)
        .join(Sale, Sale.id == SaleSnapshot.shopping_mall_sale_id)
        .where(Sale.shopping_mall_seller_user_id == seller_id),
    )


async def seller_order(lc: Lifecycle, order_id: UUID, actor: Actor) -> Order:
    """A live order holding at least one live item of the seller's."""
    order = await lc.get_live(Order, order_id)
    first = await lc.db.scalar(
        select(OrderItem.id).where(
            OrderItem.shopping_mall_order_id == order_id,
            OrderItem.deleted_at.is_(None),
            sold_by(actor.id),
        ).limit(1),
    )
    if first is None:
        raise ForbiddenError(
            "This order holds none of your sales",
            context=ErrorContext(resource="Order", actor_id=str(actor.id)),
        )
    return order


@seller_router.patch("/{order_id}/items", response_model=Page[OrderItemResponse])
async def seller_search_order_items(
    order_id: UUID,
    body: OrderItemSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await seller_order(lc, order_id, actor)
    return await search_page(
        lc.db, ORDER_ITEMS, body,
        equals(OrderItem.shopping_mall_order_id, order_id),
        sold_by(actor.id),
        equals(OrderItem.order_item_status, body.order_item_status),
        equals(OrderItem.shopping_mall_sale_snapshot_id, body.shopping_mall_sale_snapshot_id),
        dto=OrderItemResponse,
    )


@seller_router.put("/{order_id}/items/{item_id}", response_model=OrderItemResponse)
async def seller_update_order_item(
    order_id: UUID,
    item_id: UUID,
    body: OrderItemUpdate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Order, order_id)
    item = await lc.get_live(OrderItem, item_id, OrderItem.shopping_mall_order_id == order_id)
    seller_id = await lc.db.scalar(
        select(Sale.shopping_mall_seller_user_id)
        .join(SaleSnapshot, SaleSnapshot.shopping_mall_sale_id == Sale.id)
        .where(SaleSnapshot.id == item.shopping_mall_sale_snapshot_id),
    )
    ensure_owner(seller_id, actor, "order item")
    return await lc.update(item, body.model_dump(exclude_unset=True))


# ─── Admin ───────────────────────────────────────────────────────

@admin_router.patch("", response_model=Page[OrderResponse])
async def admin_search_orders(
    body: AdminOrderSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await search_page(
        lc.db, ORDERS, body,
        *_order_predicates(body),
        equals(Order.member_user_id, body.member_user_id),
        equals(Order.guest_user_id, body.guest_user_id),
        dto=OrderResponse,
        deleted=body.deleted,
    )


@admin_router.get("/{order_id}", response_model=OrderResponse)
async def admin_get_order(
    order_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Order, order_id)


@admin_router.put("/{order_id}", response_model=OrderResponse)
async def admin_update_order(
    order_id: UUID,
    body: OrderUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    order = await lc.get_live(Order, order_id)
    return await lc.update(order, body.model_dump(exclude_unset=True))


@admin_router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_order(
    order_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Order, order_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
