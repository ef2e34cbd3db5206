"""Account routes — admin account search and the member's own profile."""

from tests.api.helpers import ADMIN, MEMBER


async def test_member_reads_and_updates_profile(client, member):
    me = await client.get(f"{MEMBER}/me", headers=member.headers)
    assert me.json()["id"] == member.id

    updated = await client.put(
        f"{MEMBER}/me", json={"nickname": "shopper", "phone_number": "010-1234-5678"},
        headers=member.headers,
    )
    assert updated.json()["nickname"] == "shopper"
    assert updated.json()["email"] == "member@example.com"

    cleared = await client.put(f"{MEMBER}/me", json={"phone_number": None}, headers=member.headers)
    assert cleared.json()["phone_number"] is None


async def test_member_cannot_null_nickname(client, member):
    resp = await client.put(f"{MEMBER}/me", json={"nickname": None}, headers=member.headers)
    assert resp.status_code == 400


async def test_admin_searches_members(client, admin, member, other_member):
    resp = await client.patch(
        f"{ADMIN}/memberUsers", json={"search": "other"}, headers=admin.headers,
    )

    data = resp.json()["data"]
    assert [m["id"] for m in data] == [other_member.id]
    assert "password_hash" not in data[0]


async def test_admin_reads_seller_and_guest(client, admin, seller, guest):
    seller_resp = await client.get(f"{ADMIN}/sellerUsers/{seller.id}", headers=admin.headers)
    guest_resp = await client.get(f"{ADMIN}/guestUsers/{guest.id}", headers=admin.headers)

    assert seller_resp.json()["email"] == "seller@example.com"
    assert guest_resp.json()["user_agent"] == "pytest"


async def test_members_cannot_search_accounts(client, member):
    resp = await client.patch(f"{ADMIN}/memberUsers", json={}, headers=member.headers)
    assert resp.status_code == 403
