"""Payment and delivery routes — records under an order."""

from uuid import uuid4

from tests.api.helpers import ADMIN, GUEST, MEMBER, SELLER, create_order, create_order_item


def _payment(order_id: str, **extra) -> dict:
    return {
        "shopping_mall_order_id": order_id, "payment_method": "card",
        "payment_status": "approved", "payment_amount": 25000, **extra,
    }


async def test_member_pays_own_order(client, member, channel):
    order = await create_order(client, member, channel["id"])
    base = f"{MEMBER}/orders/{order['id']}/payments"

    created = await client.post(base, json=_payment(order["id"]), headers=member.headers)
    assert created.status_code == 201
    assert created.json()["cancelled_at"] is None

    listed = await client.patch(base, json={"payment_method": "card"}, headers=member.headers)
    assert listed.json()["pagination"]["records"] == 1

    fetched = await client.get(f"{base}/{created.json()['id']}", headers=member.headers)
    assert fetched.json()["payment_amount"] == 25000


async def test_body_order_must_match_path(client, member, channel):
    order = await create_order(client, member, channel["id"])

    resp = await client.post(
        f"{MEMBER}/orders/{order['id']}/payments",
        json=_payment(str(uuid4())), headers=member.headers,
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_member_cannot_pay_for_someone_else(client, member, other_member, channel):
    order = await create_order(client, member, channel["id"])

    resp = await client.post(
        f"{MEMBER}/orders/{order['id']}/payments",
        json=_payment(order["id"]), headers=other_member.headers,
    )
    assert resp.status_code == 403


async def test_guest_payments(client, guest, channel):
    order = await create_order(client, guest, channel["id"], role="guestUser")
    base = f"{GUEST}/orders/{order['id']}/payments"

    created = await client.post(base, json=_payment(order["id"]), headers=guest.headers)
    listed = await client.patch(base, json={}, headers=guest.headers)

    assert created.status_code == 201
    assert listed.json()["data"][0]["id"] == created.json()["id"]


async def test_admin_cancels_payment(client, member, admin, channel):
    order = await create_order(client, member, channel["id"])
    payment = await client.post(
        f"{MEMBER}/orders/{order['id']}/payments",
        json=_payment(order["id"], transaction_id="tx-1"), headers=member.headers,
    )
    path = f"{ADMIN}/orders/{order['id']}/payments/{payment.json()['id']}"

    resp = await client.put(
        path,
        json={"payment_status": "cancelled", "cancelled_at": "2024-03-01T09:00:00+09:00"},
        headers=admin.headers,
    )

    body = resp.json()
    assert body["payment_status"] == "cancelled"
    assert body["cancelled_at"] == "2024-03-01T00:00:00.000Z"
    assert body["transaction_id"] == "tx-1"


async def test_payment_is_scoped_to_its_order(client, member, admin, channel):
    first = await create_order(client, member, channel["id"], code="O1")
    second = await create_order(client, member, channel["id"], code="O2")
    payment = await client.post(
        f"{MEMBER}/orders/{first['id']}/payments",
        json=_payment(first["id"]), headers=member.headers,
    )

    resp = await client.get(
        f"{ADMIN}/orders/{second['id']}/payments/{payment.json()['id']}",
        headers=admin.headers,
    )
    assert resp.status_code == 404


async def test_seller_records_delivery(client, member, seller, channel):
    order = await create_order(client, member, channel["id"])
    base = f"{SELLER}/orders/{order['id']}/deliveries"

    created = await client.post(
        base, json={"delivery_status": "ready", "delivery_stage": "preparing"},
        headers=seller.headers,
    )
    assert created.status_code == 201

    path = f"{base}/{created.json()['id']}"
    updated = await client.put(path, json={"delivery_stage": "shipping"}, headers=seller.headers)
    assert updated.json()["delivery_stage"] == "shipping"
    assert updated.json()["delivery_status"] == "ready"

    assert (await client.delete(path, headers=seller.headers)).status_code == 204
    listed = await client.patch(base, json={}, headers=seller.headers)
    assert listed.json()["pagination"]["records"] == 0


async def test_delivery_under_missing_order_is_not_found(client, admin):
    resp = await client.post(
        f"{ADMIN}/orders/{uuid4()}/deliveries",
        json={"delivery_status": "ready", "delivery_stage": "preparing"},
        headers=admin.headers,
    )
    assert resp.status_code == 404


async def test_member_updates_own_payment(client, member, other_member, channel):
    order = await create_order(client, member, channel["id"])
    base = f"{MEMBER}/orders/{order['id']}/payments"
    payment = await client.post(base, json=_payment(order["id"]), headers=member.headers)
    path = f"{base}/{payment.json()['id']}"

    updated = await client.put(path, json={"payment_method": "transfer"}, headers=member.headers)
    assert updated.status_code == 200
    assert updated.json()["payment_method"] == "transfer"
    assert updated.json()["payment_amount"] == 25000

    foreign = await client.put(path, json={"payment_method": "cash"}, headers=other_member.headers)
    assert foreign.status_code == 403


async def test_seller_manages_payments_of_orders_with_their_items(
    client, member, seller, channel, snapshot,
):
    order = await create_order(client, member, channel["id"])
    await create_order_item(client, member, order["id"], snapshot["id"])
    base = f"{SELLER}/orders/{order['id']}/payments"

    created = await client.post(base, json=_payment(order["id"]), headers=seller.headers)
    assert created.status_code == 201

    listed = await client.patch(base, json={"payment_status": "approved"}, headers=seller.headers)
    assert listed.json()["pagination"]["records"] == 1

    refunded = await client.put(
        f"{base}/{created.json()['id']}", json={"payment_status": "refunded"},
        headers=seller.headers,
    )
    assert refunded.json()["payment_status"] == "refunded"


async def test_seller_outside_the_order_is_forbidden(client, member, other_seller, channel, snapshot):
    order = await create_order(client, member, channel["id"])
    await create_order_item(client, member, order["id"], snapshot["id"])

    resp = await client.post(
        f"{SELLER}/orders/{order['id']}/payments",
        json=_payment(order["id"]), headers=other_seller.headers,
    )
    assert resp.status_code == 403
