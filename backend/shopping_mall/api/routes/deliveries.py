"""Delivery Routes — shipment records under an order, managed by admins and sellers.

Invariants:
    - The order in the path must be live
    - A delivery is only reachable under its own order
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, seller_actor
from shopping_mall.core.domain_types import Actor, ActorType
from shopping_mall.models.orders import Delivery, Order
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.orders import (
    DeliveryCreate, DeliveryResponse, DeliverySearch, DeliveryUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, equals, search_page

DELIVERIES = Listing(
    Delivery,
    frozenset({
        "created_at", "updated_at", "delivery_status", "delivery_stage",
        "expected_delivery_date",
    }),
)


def build_router(role: ActorType, require_actor) -> APIRouter:
    router = APIRouter(
        prefix=f"/shoppingMall/{role.route_segment}/orders/{{order_id}}/deliveries",
        tags=["deliveries"],
    )

    async def _delivery(lc: Lifecycle, order_id: UUID, delivery_id: UUID) -> Delivery:
        await lc.get_live(Order, order_id)
        return await lc.get_live(
            Delivery, delivery_id, Delivery.shopping_mall_order_id == order_id,
        )

    @router.post("", response_model=DeliveryResponse, status_code=status.HTTP_201_CREATED)
    async def create_delivery(
        order_id: UUID,
        body: DeliveryCreate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.get_live(Order, order_id)
        return await lc.create(Delivery, shopping_mall_order_id=order_id, **body.model_dump())

    @router.patch("", response_model=Page[DeliveryResponse])
    async def search_deliveries(
        order_id: UUID,
        body: DeliverySearch,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.get_live(Order, order_id)
        return await search_page(
            lc.db, DELIVERIES, body,
            equals(Delivery.shopping_mall_order_id, order_id),
            equals(Delivery.delivery_status, body.delivery_status),
            equals(Delivery.delivery_stage, body.delivery_stage),
            dto=DeliveryResponse,
        )

    @router.get("/{delivery_id}", response_model=DeliveryResponse)
    async def get_delivery(
        order_id: UUID,
        delivery_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await _delivery(lc, order_id, delivery_id)

    @router.put("/{delivery_id}", response_model=DeliveryResponse)
    async def update_delivery(
        order_id: UUID,
        delivery_id: UUID,
        body: DeliveryUpdate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        delivery = await _delivery(lc, order_id, delivery_id)
        return await lc.update(delivery, body.model_dump(exclude_unset=True))

    @router.delete("/{delivery_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_delivery(
        order_id: UUID,
        delivery_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.remove(await _delivery(lc, order_id, delivery_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


admin_router = build_router(ActorType.ADMIN, admin_actor)
seller_router = build_router(ActorType.SELLER, seller_actor)
