"""Health & Readiness — liveness always up, readiness tracks store wiring."""


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "contact-api"


async def test_readiness_reports_contact_count(client):
    await client.post("/api/v1/contacts", json={"name": "nonzero"})
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready",
        "checks": {"store": "healthy"},
        "contacts": 1,
    }


async def test_readiness_without_store(unwired_client):
    res = await unwired_client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"
