"""Auth routes — join, login, refresh, and bearer-token enforcement."""

from datetime import datetime, timezone
from uuid import UUID

from shopping_mall.models.actors import MemberUser
from tests.api.helpers import MEMBER, ADMIN, bearer, member_payload, seller_payload


async def test_member_join_returns_account_and_tokens(client):
    resp = await client.post("/auth/memberUser/join", json=member_payload())

    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "member@example.com"
    assert body["status"] == "active"
    assert body["deleted_at"] is None
    assert "password" not in body
    assert "password_hash" not in body
    assert body["token"]["access"]
    assert body["token"]["refresh"]
    assert body["token"]["expired_at"].endswith("Z")
    assert body["created_at"].endswith("Z")


async def test_join_with_taken_email_conflicts(client, member):
    resp = await client.post("/auth/memberUser/join", json=member_payload())

    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "CONFLICT"


async def test_join_rejects_short_password(client):
    payload = {**member_payload(), "password": "123"}
    resp = await client.post("/auth/memberUser/join", json=payload)

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_join_rejects_malformed_email(client):
    payload = {**member_payload(), "email": "not-an-email"}
    resp = await client.post("/auth/memberUser/join", json=payload)
    assert resp.status_code == 400


async def test_login_with_correct_password(client, member):
    resp = await client.post(
        "/auth/memberUser/login",
        json={"email": "member@example.com", "password": "secret123"},
    )

    assert resp.status_code == 200
    assert resp.json()["id"] == member.id


async def test_login_with_wrong_password_is_unauthorized(client, member):
    resp = await client.post(
        "/auth/memberUser/login",
        json={"email": "member@example.com", "password": "wrong-password"},
    )

    assert resp.status_code == 401
    assert resp.json()["error"]["message"] == "Invalid credentials"


async def test_login_for_unknown_email_is_unauthorized(client):
    resp = await client.post(
        "/auth/sellerUser/login",
        json={"email": "nobody@example.com", "password": "secret123"},
    )
    assert resp.status_code == 401


async def test_member_credentials_do_not_open_seller_login(client, member):
    resp = await client.post(
        "/auth/sellerUser/login",
        json={"email": "member@example.com", "password": "secret123"},
    )
    assert resp.status_code == 401


async def test_refresh_issues_new_pair(client, member):
    refresh = member.body["token"]["refresh"]

    resp = await client.post("/auth/memberUser/refresh", json={"refresh_token": refresh})

    assert resp.status_code == 200
    assert resp.json()["id"] == member.id
    assert resp.json()["token"]["access"]


async def test_refresh_accepts_camel_case_field(client, member):
    refresh = member.body["token"]["refresh"]
    resp = await client.post("/auth/memberUser/refresh", json={"refreshToken": refresh})
    assert resp.status_code == 200


async def test_access_token_cannot_refresh(client, member):
    access = member.body["token"]["access"]
    resp = await client.post("/auth/memberUser/refresh", json={"refresh_token": access})
    assert resp.status_code == 401


async def test_refresh_token_of_another_role_is_rejected(client, member):
    refresh = member.body["token"]["refresh"]
    resp = await client.post("/auth/adminUser/refresh", json={"refresh_token": refresh})
    assert resp.status_code == 401


async def test_refresh_token_cannot_call_endpoints(client, member):
    refresh = member.body["token"]["refresh"]
    resp = await client.get(f"{MEMBER}/me", headers=bearer(refresh))
    assert resp.status_code == 401


async def test_missing_token_is_unauthorized(client):
    resp = await client.patch(f"{MEMBER}/carts", json={})

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "UNAUTHORIZED"


async def test_garbage_token_is_unauthorized(client):
    resp = await client.patch(f"{MEMBER}/carts", json={}, headers=bearer("not.a.jwt"))
    assert resp.status_code == 401


async def test_token_of_wrong_role_is_forbidden(client, member):
    resp = await client.patch(f"{ADMIN}/channels", json={}, headers=member.headers)

    assert resp.status_code == 403
    assert resp.json()["error"]["code"] == "FORBIDDEN"


async def test_seller_join_keeps_business_number(client):
    resp = await client.post("/auth/sellerUser/join", json=seller_payload())

    assert resp.status_code == 201
    assert resp.json()["business_registration_number"] == "123-45-67890"


async def test_guest_join_and_refresh(client):
    joined = await client.post("/auth/guestUser/join", json={"user_agent": "pytest"})
    assert joined.status_code == 201
    assert joined.json()["ip_address"] is None

    resp = await client.post(
        "/auth/guestUser/refresh",
        json={"refresh_token": joined.json()["token"]["refresh"]},
    )

    assert resp.status_code == 200
    assert resp.json()["id"] == joined.json()["id"]


async def test_soft_deleted_account_token_is_rejected(client, member, test_db):
    row = await test_db.get(MemberUser, UUID(member.id))
    row.deleted_at = datetime.now(timezone.utc)
    await test_db.commit()

    resp = await client.get(f"{MEMBER}/me", headers=member.headers)
    assert resp.status_code == 401
