"""A full working day: admin onboards a lawyer who runs a matter end to end."""

from httpx import AsyncClient

from firmdesk.infrastructure.persistence.seed import ADMIN_EMAIL


async def _login(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


async def test_matter_lifecycle(client: AsyncClient, seeded) -> None:
    admin = await _login(client, ADMIN_EMAIL, "admin123")

    lawyer = (
        await client.post(
            "/api/users",
            headers=admin,
            json={
                "email": "kamau@firm.co.ke",
                "password": "kamau-pass",
                "name": "Peter Kamau",
                "roleId": seeded.lawyer_role.id,
                "practiceAreaIds": [seeded.practice_area.id],
            },
        )
    ).json()
    paralegal = (
        await client.post(
            "/api/users",
            headers=admin,
            json={"email": "achieng@firm.co.ke", "password": "achieng-pass", "name": "Mary Achieng"},
        )
    ).json()

    kamau = await _login(client, "kamau@firm.co.ke", "kamau-pass")
    achieng = await _login(client, "achieng@firm.co.ke", "achieng-pass")

    case = (
        await client.post(
            "/api/cases",
            headers=kamau,
            json={
                "title": "Share purchase",
                "clientName": "Savannah Holdings",
                "practiceAreaId": seeded.practice_area.id,
            },
        )
    ).json()
    assert (await client.get(f"/api/cases/{case['id']}", headers=achieng)).status_code == 403

    await client.post(
        f"/api/cases/{case['id']}/assign", headers=kamau, json={"userId": paralegal["id"]}
    )
    document = (
        await client.post(
            "/api/documents",
            headers=achieng,
            data={"caseId": case["id"]},
            files={"file": ("SPA draft.docx", b"draft", "application/octet-stream")},
        )
    ).json()
    assert document["type"] == "DOCX"

    downloaded = await client.get(f"/api/documents/{document['id']}/download", headers=kamau)
    assert downloaded.content == b"draft"

    closed = await client.patch(
        f"/api/cases/{case['id']}", headers=kamau, json={"status": "completed"}
    )
    assert closed.json()["status"] == "completed"

    # Dependents go first; the owner stays guarded until its case is gone.
    assert (await client.delete(f"/api/users/{lawyer['id']}", headers=admin)).status_code == 409
    assert (await client.delete(f"/api/documents/{document['id']}", headers=admin)).status_code == 204
    assert (
        await client.delete(f"/api/cases/{case['id']}/users/{paralegal['id']}", headers=kamau)
    ).status_code == 204
    assert (await client.delete(f"/api/cases/{case['id']}", headers=admin)).status_code == 204
    assert (await client.delete(f"/api/users/{lawyer['id']}", headers=admin)).status_code == 204
    assert (await client.delete(f"/api/users/{paralegal['id']}", headers=admin)).status_code == 204

    remaining = await client.get("/api/users", headers=admin)
    assert [u["email"] for u in remaining.json()] == [ADMIN_EMAIL]


async def test_associate_scenario(client: AsyncClient, seeded) -> None:
    """Assignment grants read but not write; the case deletes once unassigned."""
    admin = await _login(client, ADMIN_EMAIL, "admin123")

    role = await client.post("/api/roles", headers=admin, json={"name": "Associate"})
    assert role.status_code == 201
    area = await client.post("/api/practice-areas", headers=admin, json={"name": "Corporate"})
    assert area.status_code == 201
    associate = await client.post(
        "/api/users",
        headers=admin,
        json={
            "email": "associate@firm.co.ke",
            "password": "associate-pass",
            "name": "Grace Njeri",
            "roleId": role.json()["id"],
        },
    )
    assert associate.status_code == 201
    associate_id = associate.json()["id"]

    case = await client.post(
        "/api/cases",
        headers=admin,
        json={"title": "Board dispute", "clientName": "Rift Co", "practiceAreaId": area.json()["id"]},
    )
    assert case.status_code == 201
    case_id = case.json()["id"]
    assign = await client.post(
        f"/api/cases/{case_id}/assign", headers=admin, json={"userId": associate_id}
    )
    assert assign.status_code == 201

    njeri = await _login(client, "associate@firm.co.ke", "associate-pass")
    assert (await client.get(f"/api/cases/{case_id}", headers=njeri)).status_code == 200
    assert (
        await client.patch(f"/api/cases/{case_id}", headers=njeri, json={"title": "Mine now"})
    ).status_code == 403

    completed = await client.patch(
        f"/api/cases/{case_id}", headers=admin, json={"status": "completed"}
    )
    assert completed.status_code == 200
    assert completed.json()["status"] == "completed"

    assert (await client.delete(f"/api/cases/{case_id}", headers=admin)).status_code == 409
    assert (
        await client.delete(f"/api/cases/{case_id}/users/{associate_id}", headers=admin)
    ).status_code == 204
    assert (await client.delete(f"/api/cases/{case_id}", headers=admin)).status_code == 204
    assert (await client.get(f"/api/cases/{case_id}", headers=admin)).status_code == 404
