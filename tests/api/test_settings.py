"""Firm settings: a single row, created lazily, admin only."""

from httpx import AsyncClient


async def test_settings_admin_only(client: AsyncClient, make_user, headers_for) -> None:
    user = await make_user()
    assert (await client.get("/api/settings", headers=headers_for(user))).status_code == 403
    assert (
        await client.patch("/api/settings", headers=headers_for(user), json={"phone": "1"})
    ).status_code == 403


async def test_get_creates_defaults_once(client: AsyncClient, admin_headers) -> None:
    first = await client.get("/api/settings", headers=admin_headers)
    assert first.status_code == 200
    assert first.json()["firmName"] == "CFL Legal"
    assert first.json()["location"] == "Kilimani, Nairobi"

    second = await client.get("/api/settings", headers=admin_headers)
    assert second.json()["id"] == first.json()["id"]


async def test_patch_updates_supplied_fields(client: AsyncClient, admin_headers) -> None:
    await client.get("/api/settings", headers=admin_headers)
    response = await client.patch(
        "/api/settings",
        headers=admin_headers,
        json={"phone": "+254 700 000000", "email": "info@cfllegal.co.ke"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "+254 700 000000"
    assert body["email"] == "info@cfllegal.co.ke"
    assert body["firmName"] == "CFL Legal"


async def test_patch_without_row_needs_full_payload(client: AsyncClient, admin_headers) -> None:
    partial = await client.patch("/api/settings", headers=admin_headers, json={"phone": "1"})
    assert partial.status_code == 400

    full = await client.patch(
        "/api/settings",
        headers=admin_headers,
        json={"firmName": "Acme Advocates", "location": "Westlands"},
    )
    assert full.status_code == 200
    assert full.json()["firmName"] == "Acme Advocates"
