"""Payment Routes — payments recorded against an order.

Invariants:
    - The order in the path must be live and, for members and guests, owned by the
      caller; a seller must hold at least one item of it
    - On create, body.shopping_mall_order_id must equal the path order id
    - Payments are hard-deleted; cancellation is an update of cancelled_at/payment_status
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from shopping_mall.api.dependencies import (
    admin_actor, guest_actor, member_actor, seller_actor,
)
from shopping_mall.api.routes.orders import guest_order, member_order, seller_order
from shopping_mall.core.domain_types import Actor
from shopping_mall.core.errors import ValidationFailedError
from shopping_mall.models.orders import Order, Payment
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.orders import (
    PaymentCreate, PaymentResponse, PaymentSearch, PaymentUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, equals, search_page

member_router = APIRouter(prefix="/shoppingMall/memberUser/orders", tags=["payments"])
guest_router = APIRouter(prefix="/shoppingMall/guestUser/orders", tags=["payments"])
seller_router = APIRouter(prefix="/shoppingMall/sellerUser/orders", tags=["payments"])
admin_router = APIRouter(prefix="/shoppingMall/adminUser/orders", tags=["payments"])

PAYMENTS = Listing(
    Payment, frozenset({"created_at", "updated_at", "payment_amount", "payment_status"}),
)


async def _create_payment(lc: Lifecycle, order_id: UUID, body: PaymentCreate) -> Payment:
    if body.shopping_mall_order_id != order_id:
        raise ValidationFailedError(
            "Path order id and body shopping_mall_order_id must match",
            field="shopping_mall_order_id",
        )
    return await lc.create(Payment, **body.model_dump())


async def _search_payments(lc: Lifecycle, order_id: UUID, body: PaymentSearch):
    return await search_page(
        lc.db, PAYMENTS, body,
        equals(Payment.shopping_mall_order_id, order_id),
        equals(Payment.payment_method, body.payment_method),
        equals(Payment.payment_status, body.payment_status),
        equals(Payment.transaction_id, body.transaction_id),
        dto=PaymentResponse,
    )


def _scoped(payment_id: UUID, order_id: UUID):
    return (Payment, payment_id, Payment.shopping_mall_order_id == order_id)


# ─── Member ──────────────────────────────────────────────────────

@member_router.post(
    "/{order_id}/payments", response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def member_create_payment(
    order_id: UUID,
    body: PaymentCreate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    return await _create_payment(lc, order_id, body)


@member_router.patch("/{order_id}/payments", response_model=Page[PaymentResponse])
async def member_search_payments(
    order_id: UUID,
    body: PaymentSearch,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    return await _search_payments(lc, order_id, body)


@member_router.get("/{order_id}/payments/{payment_id}", response_model=PaymentResponse)
async def member_get_payment(
    order_id: UUID,
    payment_id: UUID,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    return await lc.get_live(*_scoped(payment_id, order_id))


@member_router.put("/{order_id}/payments/{payment_id}", response_model=PaymentResponse)
async def member_update_payment(
    order_id: UUID,
    payment_id: UUID,
    body: PaymentUpdate,
    actor: Actor = Depends(member_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await member_order(lc, order_id, actor)
    payment = await lc.get_live(*_scoped(payment_id, order_id))
    return await lc.update(payment, body.model_dump(exclude_unset=True))


# ─── Guest ───────────────────────────────────────────────────────

@guest_router.post(
    "/{order_id}/payments", response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def guest_create_payment(
    order_id: UUID,
    body: PaymentCreate,
    actor: Actor = Depends(guest_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await guest_order(lc, order_id, actor)
    return await _create_payment(lc, order_id, body)


@guest_router.patch("/{order_id}/payments", response_model=Page[PaymentResponse])
async def guest_search_payments(
    order_id: UUID,
    body: PaymentSearch,
    actor: Actor = Depends(guest_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await guest_order(lc, order_id, actor)
    return await _search_payments(lc, order_id, body)


# ─── Seller ──────────────────────────────────────────────────────

@seller_router.post(
    "/{order_id}/payments", response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def seller_create_payment(
    order_id: UUID,
    body: PaymentCreate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await seller_order(lc, order_id, actor)
    return await _create_payment(lc, order_id, body)


@seller_router.patch("/{order_id}/payments", response_model=Page[PaymentResponse])
async def seller_search_payments(
    order_id: UUID,
    body: PaymentSearch,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await seller_order(lc, order_id, actor)
    return await _search_payments(lc, order_id, body)


@seller_router.put("/{order_id}/payments/{payment_id}", response_model=PaymentResponse)
async def seller_update_payment(
    order_id: UUID,
    payment_id: UUID,
    body: PaymentUpdate,
    actor: Actor = Depends(seller_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await seller_order(lc, order_id, actor)
    payment = await lc.get_live(*_scoped(payment_id, order_id))
    return await lc.update(payment, body.model_dump(exclude_unset=True))


# ─── Admin ───────────────────────────────────────────────────────

@admin_router.patch("/{order_id}/payments", response_model=Page[PaymentResponse])
async def admin_search_payments(
    order_id: UUID,
    body: PaymentSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Order, order_id)
    return await _search_payments(lc, order_id, body)


@admin_router.get("/{order_id}/payments/{payment_id}", response_model=PaymentResponse)
async def admin_get_payment(
    order_id: UUID,
    payment_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Order, order_id)
    return await lc.get_live(*_scoped(payment_id, order_id))


@admin_router.put("/{order_id}/payments/{payment_id}", response_model=PaymentResponse)
async def admin_update_payment(
    order_id: UUID,
    payment_id: UUID,
    body: PaymentUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Order, order_id)
    payment = await lc.get_live(*_scoped(payment_id, order_id))
    return await lc.update(payment, body.model_dump(exclude_unset=True))
