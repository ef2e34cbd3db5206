"""Coupon routes — admin management, member visibility, coupon tickets."""

from tests.api.helpers import ADMIN, MEMBER

COUPONS = f"{ADMIN}/coupons"


def _coupon(code: str, status: str = "active", **extra) -> dict:
    return {
        "coupon_code": code, "coupon_name": f"Coupon {code}",
        "discount_type": "amount", "discount_value": 3000, "status": status,
        "start_date": "2024-01-01T00:00:00Z", "end_date": "2030-12-31T23:59:59Z",
        **extra,
    }


async def _create(client, admin, code, status="active"):
    resp = await client.post(COUPONS, json=_coupon(code, status), headers=admin.headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_admin_creates_coupon(client, admin):
    coupon = await _create(client, admin, "WELCOME")

    assert coupon["start_date"] == "2024-01-01T00:00:00.000Z"
    assert coupon["usage_limit"] is None


async def test_coupon_code_is_unique(client, admin):
    await _create(client, admin, "WELCOME")

    resp = await client.post(COUPONS, json=_coupon("WELCOME"), headers=admin.headers)
    assert resp.status_code == 409


async def test_reversed_period_is_rejected(client, admin):
    payload = _coupon("BACKWARDS", start_date="2025-01-01T00:00:00Z", end_date="2024-01-01T00:00:00Z")

    resp = await client.post(COUPONS, json=payload, headers=admin.headers)
    assert resp.status_code == 400


async def test_update_cannot_move_end_before_stored_start(client, admin):
    coupon = await _create(client, admin, "SPRING")

    resp = await client.put(
        f"{COUPONS}/{coupon['id']}", json={"end_date": "2020-01-01T00:00:00Z"},
        headers=admin.headers,
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    unchanged = await client.get(f"{COUPONS}/{coupon['id']}", headers=admin.headers)
    assert unchanged.json()["end_date"] == "2030-12-31T23:59:59.000Z"


async def test_update_cannot_move_start_after_stored_end(client, admin):
    coupon = await _create(client, admin, "AUTUMN")

    resp = await client.put(
        f"{COUPONS}/{coupon['id']}", json={"start_date": "2031-06-01T00:00:00Z"},
        headers=admin.headers,
    )
    assert resp.status_code == 400


async def test_update_within_stored_period_is_applied(client, admin):
    coupon = await _create(client, admin, "WINTER")

    resp = await client.put(
        f"{COUPONS}/{coupon['id']}", json={"end_date": "2025-01-01T00:00:00Z"},
        headers=admin.headers,
    )
    assert resp.status_code == 200
    assert resp.json()["start_date"] == "2024-01-01T00:00:00.000Z"
    assert resp.json()["end_date"] == "2025-01-01T00:00:00.000Z"


async def test_members_only_see_active_coupons(client, admin, member):
    live = await _create(client, admin, "LIVE")
    paused = await _create(client, admin, "PAUSED", status="paused")

    listed = await client.patch(f"{MEMBER}/coupons", json={}, headers=member.headers)
    assert [c["id"] for c in listed.json()["data"]] == [live["id"]]

    hidden = await client.get(f"{MEMBER}/coupons/{paused['id']}", headers=member.headers)
    assert hidden.status_code == 404


async def test_coupon_ticket_issued_to_caller(client, admin, member, other_member):
    coupon = await _create(client, admin, "TICKET")

    ticket = await client.post(
        f"{MEMBER}/couponTickets",
        json={"shopping_mall_coupon_id": coupon["id"], "status": "issued"},
        headers=member.headers,
    )
    assert ticket.status_code == 201
    assert ticket.json()["member_user_id"] == member.id
    path = f"{MEMBER}/couponTickets/{ticket.json()['id']}"

    used = await client.put(
        path, json={"status": "used", "used_at": "2024-06-01T00:00:00Z"}, headers=member.headers,
    )
    assert used.json()["used_at"] == "2024-06-01T00:00:00.000Z"

    assert (await client.get(path, headers=other_member.headers)).status_code == 403


async def test_ticket_for_deleted_coupon_is_not_found(client, admin, member):
    coupon = await _create(client, admin, "GONE")
    await client.delete(f"{COUPONS}/{coupon['id']}", headers=admin.headers)

    resp = await client.post(
        f"{MEMBER}/couponTickets",
        json={"shopping_mall_coupon_id": coupon["id"], "status": "issued"},
        headers=member.headers,
    )
    assert resp.status_code == 404
