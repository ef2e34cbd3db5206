"""Fraud detection routes — admin records with a detection window filter."""

from tests.api.helpers import ADMIN

BASE = f"{ADMIN}/fraudDetections"


async def _detect(client, admin, detected_at, risk="high"):
    resp = await client.post(
        BASE,
        json={
            "detection_type": "velocity", "risk_level": risk,
            "status": "open", "detected_at": detected_at,
        },
        headers=admin.headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_detection_window(client, admin):
    await _detect(client, admin, "2024-01-01T00:00:00Z")
    inside = await _detect(client, admin, "2024-02-15T00:00:00Z")
    await _detect(client, admin, "2024-04-01T00:00:00Z")

    resp = await client.patch(
        BASE,
        json={"detected_from": "2024-02-01T00:00:00Z", "detected_to": "2024-03-01T00:00:00Z"},
        headers=admin.headers,
    )

    assert [d["id"] for d in resp.json()["data"]] == [inside["id"]]


async def test_detection_update_keeps_unsent_fields(client, admin):
    created = await _detect(client, admin, "2024-01-01T00:00:00Z", risk="low")

    resp = await client.put(
        f"{BASE}/{created['id']}", json={"status": "resolved"}, headers=admin.headers,
    )

    assert resp.json()["status"] == "resolved"
    assert resp.json()["risk_level"] == "low"
    assert resp.json()["detected_at"] == "2024-01-01T00:00:00.000Z"
