"""Request helpers shared by the API tests — join accounts, seed catalog rows."""

from dataclasses import dataclass

from httpx import AsyncClient

ADMIN = "/shoppingMall/adminUser"
SELLER = "/shoppingMall/sellerUser"
MEMBER = "/shoppingMall/memberUser"
GUEST = "/shoppingMall/guestUser"


@dataclass
class Account:
    id: str
    headers: dict
    body: dict


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def join(client: AsyncClient, role: str, payload: dict) -> Account:
    resp = await client.post(f"/auth/{role}User/join", json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    return Account(id=body["id"], headers=bearer(body["token"]["access"]), body=body)


def member_payload(email: str = "member@example.com") -> dict:
    return {
        "email": email, "password": "secret123",
        "nickname": "buyer", "full_name": "Kim Buyer",
    }


def seller_payload(email: str = "seller@example.com") -> dict:
    return {
        "email": email, "password": "secret123", "nickname": "maker",
        "full_name": "Lee Maker", "business_registration_number": "123-45-67890",
    }


def admin_payload(email: str = "admin@example.com") -> dict:
    return {
        "email": email, "password": "secret123",
        "nickname": "ops", "full_name": "Park Ops",
    }


async def create_channel(client: AsyncClient, admin: Account, code: str = "web") -> dict:
    resp = await client.post(
        f"{ADMIN}/channels",
        json={"code": code, "name": f"{code} channel", "status": "active"},
        headers=admin.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_sale(
    client: AsyncClient, seller: Account, channel_id: str,
    code: str = "SALE-1", price: float = 10000, **extra,
) -> dict:
    resp = await client.post(
        f"{SELLER}/sales",
        json={
            "shopping_mall_channel_id": channel_id,
            "shopping_mall_seller_user_id": seller.id,
            "code": code, "name": f"Sale {code}", "status": "active",
            "price": price, **extra,
        },
        headers=seller.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_order(
    client: AsyncClient, account: Account, channel_id: str,
    code: str = "ORD-1", role: str = "memberUser", **extra,
) -> dict:
    resp = await client.post(
        f"/shoppingMall/{role}/orders",
        json={
            "shopping_mall_channel_id": channel_id, "order_code": code,
            "order_status": "pending", "payment_status": "unpaid",
            "total_price": 25000, **extra,
        },
        headers=account.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def latest_snapshot(client: AsyncClient, seller: Account, sale_id: str) -> dict:
    resp = await client.patch(
        f"{SELLER}/sales/{sale_id}/snapshots", json={"limit": 1}, headers=seller.headers,
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["data"][0]


async def create_order_item(
    client: AsyncClient, member: Account, order_id: str, snapshot_id: str, quantity: int = 1,
) -> dict:
    resp = await client.post(
        f"{MEMBER}/orders/{order_id}/items",
        json={
            "shopping_mall_sale_snapshot_id": snapshot_id, "quantity": quantity,
            "price": 10000, "order_item_status": "ordered",
        },
        headers=member.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
