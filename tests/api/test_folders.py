"""Folders: private to their creator (and admins)."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def owner(make_user):
    return await make_user(email="owner@firm.co.ke")


@pytest.fixture
async def stranger(make_user):
    return await make_user(email="stranger@firm.co.ke")


async def _create_folder(client: AsyncClient, headers: dict, name: str = "Templates") -> dict:
    response = await client.post("/api/folders", headers=headers, json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_and_list_own(client, owner, stranger, headers_for, admin_headers) -> None:
    mine = await _create_folder(client, headers_for(owner))
    theirs = await _create_folder(client, headers_for(stranger), "Other")
    assert mine["createdById"] == owner.id

    listed = await client.get("/api/folders", headers=headers_for(owner))
    assert [f["id"] for f in listed.json()] == [mine["id"]]

    everything = await client.get("/api/folders", headers=admin_headers)
    assert {f["id"] for f in everything.json()} == {mine["id"], theirs["id"]}


async def test_stranger_denied(client, owner, stranger, headers_for) -> None:
    folder = await _create_folder(client, headers_for(owner))
    for method, path in (
        ("GET", f"/api/folders/{folder['id']}"),
        ("PATCH", f"/api/folders/{folder['id']}"),
        ("DELETE", f"/api/folders/{folder['id']}"),
        ("GET", f"/api/folders/{folder['id']}/documents"),
    ):
        kwargs = {"json": {"name": "x"}} if method == "PATCH" else {}
        response = await client.request(method, path, headers=headers_for(stranger), **kwargs)
        assert response.status_code == 403, (method, path)
        assert response.json()["message"] == "Access denied to this folder"


async def test_owner_updates_and_deletes(client, owner, headers_for) -> None:
    headers = headers_for(owner)
    folder = await _create_folder(client, headers)
    updated = await client.patch(
        f"/api/folders/{folder['id']}",
        headers=headers,
        json={"name": "Precedents", "description": "Court filings"},
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Precedents"
    assert updated.json()["description"] == "Court filings"

    assert (await client.delete(f"/api/folders/{folder['id']}", headers=headers)).status_code == 204
    assert (await client.get(f"/api/folders/{folder['id']}", headers=headers)).status_code == 404


async def test_admin_reads_any_folder(client, owner, headers_for, admin_headers) -> None:
    folder = await _create_folder(client, headers_for(owner))
    response = await client.get(f"/api/folders/{folder['id']}", headers=admin_headers)
    assert response.status_code == 200
