"""Health probes."""


async def test_liveness(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_readiness_checks_database(client):
    resp = await client.get("/health/ready")

    assert resp.status_code == 200
    assert resp.json()["checks"]["database"] == "healthy"
