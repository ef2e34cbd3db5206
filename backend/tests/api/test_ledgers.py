"""Ledger routes — member mileage, deposits and deposit charges."""

import pytest

from tests.api.helpers import MEMBER


async def test_mileage_belongs_to_caller(client, member, other_member):
    created = await client.post(
        f"{MEMBER}/mileages", json={"balance": 1500, "status": "active"}, headers=member.headers,
    )
    assert created.status_code == 201
    assert created.json()["member_user_id"] == member.id

    path = f"{MEMBER}/mileages/{created.json()['id']}"
    assert (await client.get(path, headers=other_member.headers)).status_code == 403

    theirs = await client.patch(f"{MEMBER}/mileages", json={}, headers=other_member.headers)
    assert theirs.json()["pagination"]["records"] == 0


async def test_mileage_balance_bounds(client, member):
    for balance in (100, 1000, 10000):
        await client.post(
            f"{MEMBER}/mileages", json={"balance": balance, "status": "active"},
            headers=member.headers,
        )

    resp = await client.patch(
        f"{MEMBER}/mileages",
        json={"min_balance": 500, "max_balance": 5000, "sort": "balance asc"},
        headers=member.headers,
    )

    assert [m["balance"] for m in resp.json()["data"]] == [1000]


@pytest.mark.parametrize("path,payload", [
    ("mileages", {"balance": -1, "status": "active"}),
    ("deposits", {"deposit_amount": -5, "usable_balance": 0, "status": "active"}),
    ("depositCharges", {"charge_amount": -10, "charge_status": "pending"}),
])
async def test_negative_amounts_are_rejected(client, member, path, payload):
    resp = await client.post(f"{MEMBER}/{path}", json=payload, headers=member.headers)
    assert resp.status_code == 400


async def test_deposit_update_and_delete(client, member):
    created = await client.post(
        f"{MEMBER}/deposits",
        json={"deposit_amount": 50000, "usable_balance": 50000, "status": "active"},
        headers=member.headers,
    )
    path = f"{MEMBER}/deposits/{created.json()['id']}"

    updated = await client.put(path, json={"usable_balance": 20000}, headers=member.headers)
    assert updated.json()["usable_balance"] == 20000
    assert updated.json()["deposit_amount"] == 50000

    assert (await client.delete(path, headers=member.headers)).status_code == 204
    assert (await client.get(path, headers=member.headers)).status_code == 404


async def test_deposit_charge_timestamps_are_utc(client, member):
    resp = await client.post(
        f"{MEMBER}/depositCharges",
        json={
            "charge_amount": 10000, "charge_status": "completed",
            "payment_provider": "toss", "charged_at": "2024-05-05T12:00:00+09:00",
        },
        headers=member.headers,
    )

    assert resp.status_code == 201
    assert resp.json()["charged_at"] == "2024-05-05T03:00:00.000Z"

    listed = await client.patch(
        f"{MEMBER}/depositCharges", json={"payment_provider": "toss"}, headers=member.headers,
    )
    assert listed.json()["data"][0]["charged_at"] == "2024-05-05T03:00:00.000Z"
