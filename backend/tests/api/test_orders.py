"""Order routes — member/guest ownership, sparse updates, admin deleted filter, items."""

from uuid import uuid4

from tests.api.helpers import (
    ADMIN, GUEST, MEMBER, SELLER, create_order, create_order_item, create_sale, latest_snapshot,
)


async def test_payment_update_leaves_order_status_untouched(client, member, channel):
    order = await create_order(client, member, channel["id"], total_price=10000)

    put = await client.put(
        f"{MEMBER}/orders/{order['id']}",
        json={"payment_status": "paid"}, headers=member.headers,
    )
    assert put.status_code == 200

    resp = await client.get(f"{MEMBER}/orders/{order['id']}", headers=member.headers)
    body = resp.json()
    assert body["order_status"] == "pending"
    assert body["payment_status"] == "paid"
    assert body["total_price"] == 10000


async def test_member_order_owner_is_forced_to_caller(client, member, other_member, channel):
    order = await create_order(
        client, member, channel["id"],
        member_user_id=other_member.id, guest_user_id=str(uuid4()),
    )

    assert order["member_user_id"] == member.id
    assert order["guest_user_id"] is None


async def test_order_code_is_unique(client, member, other_member, channel):
    await create_order(client, member, channel["id"], code="ORD-77")

    resp = await client.post(
        f"{MEMBER}/orders",
        json={
            "shopping_mall_channel_id": channel["id"], "order_code": "ORD-77",
            "order_status": "pending", "payment_status": "unpaid", "total_price": 1,
        },
        headers=other_member.headers,
    )
    assert resp.status_code == 409


async def test_negative_total_is_rejected(client, member, channel):
    resp = await client.post(
        f"{MEMBER}/orders",
        json={
            "shopping_mall_channel_id": channel["id"], "order_code": "ORD-NEG",
            "order_status": "pending", "payment_status": "unpaid", "total_price": -1,
        },
        headers=member.headers,
    )
    assert resp.status_code == 400


async def test_member_cannot_see_another_members_order(client, member, other_member, channel):
    order = await create_order(client, member, channel["id"])

    resp = await client.get(f"{MEMBER}/orders/{order['id']}", headers=other_member.headers)
    assert resp.status_code == 403

    listed = await client.patch(f"{MEMBER}/orders", json={}, headers=other_member.headers)
    assert listed.json()["pagination"]["records"] == 0


async def test_member_search_filters_by_status_and_price(client, member, channel):
    await create_order(client, member, channel["id"], code="A", total_price=5000)
    paid = await create_order(
        client, member, channel["id"], code="B", total_price=50000, payment_status="paid",
    )

    by_status = await client.patch(
        f"{MEMBER}/orders", json={"payment_status": "paid"}, headers=member.headers,
    )
    by_price = await client.patch(
        f"{MEMBER}/orders", json={"min_total_price": 10000}, headers=member.headers,
    )

    assert [o["id"] for o in by_status.json()["data"]] == [paid["id"]]
    assert [o["id"] for o in by_price.json()["data"]] == [paid["id"]]


async def test_order_items_are_created_under_the_order(client, member, channel, snapshot):
    order = await create_order(client, member, channel["id"])
    base = f"{MEMBER}/orders/{order['id']}/items"

    created = await client.post(
        base,
        json={
            "shopping_mall_sale_snapshot_id": snapshot["id"], "quantity": 2,
            "price": 12500, "order_item_status": "ordered",
        },
        headers=member.headers,
    )
    assert created.status_code == 201
    assert created.json()["shopping_mall_order_id"] == order["id"]

    listed = await client.patch(base, json={}, headers=member.headers)
    fetched = await client.get(f"{base}/{created.json()['id']}", headers=member.headers)

    assert listed.json()["pagination"]["records"] == 1
    assert fetched.json()["quantity"] == 2


async def test_deleted_order_is_gone_for_member(client, member, channel):
    order = await create_order(client, member, channel["id"])
    path = f"{MEMBER}/orders/{order['id']}"

    assert (await client.delete(path, headers=member.headers)).status_code == 204
    assert (await client.get(path, headers=member.headers)).status_code == 404
    assert (await client.delete(path, headers=member.headers)).status_code == 404


async def test_admin_search_deleted_modes(client, member, admin, channel):
    live = await create_order(client, member, channel["id"], code="LIVE")
    gone = await create_order(client, member, channel["id"], code="GONE")
    await client.delete(f"{MEMBER}/orders/{gone['id']}", headers=member.headers)

    async def ids(mode):
        resp = await client.patch(
            f"{ADMIN}/orders", json={"deleted": mode}, headers=admin.headers,
        )
        return {o["id"] for o in resp.json()["data"]}

    assert await ids("live") == {live["id"]}
    assert await ids("deleted") == {gone["id"]}
    assert await ids("all") == {live["id"], gone["id"]}


async def test_admin_search_rejects_unknown_deleted_mode(client, admin):
    resp = await client.patch(f"{ADMIN}/orders", json={"deleted": "maybe"}, headers=admin.headers)
    assert resp.status_code == 400


async def test_admin_can_update_any_order(client, member, admin, channel):
    order = await create_order(client, member, channel["id"])

    resp = await client.put(
        f"{ADMIN}/orders/{order['id']}",
        json={"order_status": "shipped"}, headers=admin.headers,
    )

    assert resp.json()["order_status"] == "shipped"
    assert resp.json()["payment_status"] == "unpaid"


async def test_guest_order_belongs_to_guest(client, guest, member, channel):
    order = await create_order(client, guest, channel["id"], role="guestUser")

    assert order["guest_user_id"] == guest.id
    assert order["member_user_id"] is None
    fetched = await client.get(f"{GUEST}/orders/{order['id']}", headers=guest.headers)
    assert fetched.status_code == 200

    as_member = await client.get(f"{MEMBER}/orders/{order['id']}", headers=member.headers)
    assert as_member.status_code == 403


async def _shared_order(client, member, seller, other_seller, channel, snapshot):
    """An order holding one item from each seller."""
    theirs = await create_sale(client, other_seller, channel["id"], code="THEIRS")
    their_snapshot = await latest_snapshot(client, other_seller, theirs["id"])
    order = await create_order(client, member, channel["id"])
    mine = await create_order_item(client, member, order["id"], snapshot["id"])
    other = await create_order_item(client, member, order["id"], their_snapshot["id"])
    return order, mine, other


async def test_seller_only_sees_own_items(client, member, seller, other_seller, channel, snapshot):
    order, mine, _ = await _shared_order(client, member, seller, other_seller, channel, snapshot)

    resp = await client.patch(
        f"{SELLER}/orders/{order['id']}/items", json={}, headers=seller.headers,
    )

    assert resp.status_code == 200
    assert [i["id"] for i in resp.json()["data"]] == [mine["id"]]


async def test_seller_without_items_cannot_reach_order(client, member, other_seller, channel, snapshot):
    order = await create_order(client, member, channel["id"])
    await create_order_item(client, member, order["id"], snapshot["id"])

    resp = await client.patch(
        f"{SELLER}/orders/{order['id']}/items", json={}, headers=other_seller.headers,
    )
    assert resp.status_code == 403
    assert resp.json()["error"]["code"] == "FORBIDDEN"


async def test_seller_updates_own_item(client, member, seller, other_seller, channel, snapshot):
    order, mine, other = await _shared_order(client, member, seller, other_seller, channel, snapshot)
    base = f"{SELLER}/orders/{order['id']}/items"

    updated = await client.put(
        f"{base}/{mine['id']}", json={"order_item_status": "shipped"}, headers=seller.headers,
    )
    assert updated.status_code == 200
    assert updated.json()["order_item_status"] == "shipped"
    assert updated.json()["quantity"] == 1

    foreign = await client.put(
        f"{base}/{other['id']}", json={"order_item_status": "shipped"}, headers=seller.headers,
    )
    assert foreign.status_code == 403


async def test_seller_item_must_belong_to_order(client, member, seller, channel, snapshot):
    first = await create_order(client, member, channel["id"], code="O1")
    second = await create_order(client, member, channel["id"], code="O2")
    item = await create_order_item(client, member, first["id"], snapshot["id"])
    await create_order_item(client, member, second["id"], snapshot["id"])

    resp = await client.put(
        f"{SELLER}/orders/{second['id']}/items/{item['id']}",
        json={"quantity": 3}, headers=seller.headers,
    )
    assert resp.status_code == 404


async def test_item_for_unknown_snapshot_is_not_found(client, member, channel):
    order = await create_order(client, member, channel["id"])

    resp = await client.post(
        f"{MEMBER}/orders/{order['id']}/items",
        json={
            "shopping_mall_sale_snapshot_id": str(uuid4()), "quantity": 1,
            "price": 100, "order_item_status": "ordered",
        },
        headers=member.headers,
    )
    assert resp.status_code == 404
