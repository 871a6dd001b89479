"""Health endpoint and request id propagation."""

from httpx import AsyncClient


async def test_health_ok(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_request_id_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/health", headers={"X-Request-ID": "trace-abc"})
    assert response.headers["X-Request-ID"] == "trace-abc"


async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert len(response.headers["X-Request-ID"]) == 36
