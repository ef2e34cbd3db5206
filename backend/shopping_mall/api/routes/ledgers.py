"""Ledger Routes — a member's mileage, deposits and deposit charges.

Invariants:
    - Every row is owned by member_user_id = caller, set on create
    - Searches always filter on the caller; detail/update/delete of another
      member's row → 403

Design Decisions:
    - The three ledgers share one CRUD shape, so mount_ledger() registers
      the five handlers for each
"""

from dataclasses import dataclass
from typing import Callable
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from shopping_mall.api.dependencies import member_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.models.ledgers import Deposit, DepositCharge, Mileage
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.ledgers import (
    DepositChargeCreate, DepositChargeResponse, DepositChargeSearch,
    DepositChargeUpdate, DepositCreate, DepositResponse, DepositSearch,
    DepositUpdate, MileageCreate, MileageResponse, MileageSearch, MileageUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import Listing, at_least, at_most, equals, search_page

router = APIRouter(prefix="/shoppingMall/memberUser", tags=["ledgers"])


@dataclass(frozen=True)
class Ledger:
    path: str
    listing: Listing
    create: type[BaseModel]
    update: type[BaseModel]
    search: type[BaseModel]
    response: type[BaseModel]
    predicates: Callable


def mount_ledger(ledger: Ledger) -> None:
    model = ledger.listing.model
    resource = model.__name__
    Create, Update, Search, Out = ledger.create, ledger.update, ledger.search, ledger.response

    async def owned(lc: Lifecycle, row_id: UUID, actor: Actor):
        row = await lc.get_live(model, row_id)
        ensure_owner(row.member_user_id, actor, resource)
        return row

    @router.patch(ledger.path, response_model=Page[Out], name=f"search_{resource}")
    async def search_rows(
        body: Search,
        actor: Actor = Depends(member_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await search_page(
            lc.db, ledger.listing, body,
            equals(model.member_user_id, actor.id),
            *ledger.predicates(body),
            dto=Out,
        )

    @router.get(f"{ledger.path}/{{row_id}}", response_model=Out, name=f"get_{resource}")
    async def get_row(
        row_id: UUID,
        actor: Actor = Depends(member_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await owned(lc, row_id, actor)

    @router.post(
        ledger.path, response_model=Out, status_code=status.HTTP_201_CREATED,
        name=f"create_{resource}",
    )
    async def create_row(
        body: Create,
        actor: Actor = Depends(member_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await lc.create(model, member_user_id=actor.id, **body.model_dump())

    @router.put(f"{ledger.path}/{{row_id}}", response_model=Out, name=f"update_{resource}")
    async def update_row(
        row_id: UUID,
        body: Update,
        actor: Actor = Depends(member_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        row = await owned(lc, row_id, actor)
        return await lc.update(row, body.model_dump(exclude_unset=True))

    @router.delete(
        f"{ledger.path}/{{row_id}}", status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{resource}",
    )
    async def delete_row(
        row_id: UUID,
        actor: Actor = Depends(member_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.remove(await owned(lc, row_id, actor))
        return Response(status_code=status.HTTP_204_NO_CONTENT)


mount_ledger(Ledger(
    path="/mileages",
    listing=Listing(Mileage, frozenset({"created_at", "updated_at", "balance", "status"})),
    create=MileageCreate, update=MileageUpdate,
    search=MileageSearch, response=MileageResponse,
    predicates=lambda body: (
        equals(Mileage.status, body.status),
        at_least(Mileage.balance, body.min_balance),
        at_most(Mileage.balance, body.max_balance),
    ),
))

mount_ledger(Ledger(
    path="/deposits",
    listing=Listing(
        Deposit,
        frozenset({"created_at", "updated_at", "deposit_amount", "usable_balance", "status"}),
    ),
    create=DepositCreate, update=DepositUpdate,
    search=DepositSearch, response=DepositResponse,
    predicates=lambda body: (
        equals(Deposit.status, body.status),
        at_least(Deposit.usable_balance, body.min_usable_balance),
        at_most(Deposit.usable_balance, body.max_usable_balance),
    ),
))

mount_ledger(Ledger(
    path="/depositCharges",
    listing=Listing(
        DepositCharge,
        frozenset({"created_at", "updated_at", "charge_amount", "charged_at", "charge_status"}),
    ),
    create=DepositChargeCreate, update=DepositChargeUpdate,
    search=DepositChargeSearch, response=DepositChargeResponse,
    predicates=lambda body: (
        equals(DepositCharge.charge_status, body.charge_status),
        equals(DepositCharge.payment_provider, body.payment_provider),
    ),
))
