"""Deletes blocked by dependent rows return 409 and leave data untouched."""

from httpx import AsyncClient


async def _case(client: AsyncClient, headers: dict, practice_area_id: str) -> dict:
    response = await client.post(
        "/api/cases",
        headers=headers,
        json={"title": "Matter", "clientName": "Client", "practiceAreaId": practice_area_id},
    )
    return response.json()


async def test_role_in_use(client, seeded, make_user, admin_headers) -> None:
    await make_user()
    response = await client.delete(f"/api/roles/{seeded.lawyer_role.id}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["message"] == (
        "Cannot delete role assigned to users. Please reassign users first."
    )
    still_there = await client.get(f"/api/roles/{seeded.lawyer_role.id}", headers=admin_headers)
    assert still_there.status_code == 200


async def test_practice_area_used_by_case(client, seeded, admin_headers) -> None:
    await _case(client, admin_headers, seeded.practice_area.id)
    response = await client.delete(
        f"/api/practice-areas/{seeded.practice_area.id}", headers=admin_headers
    )
    assert response.status_code == 409
    assert response.json()["error"] == "INTEGRITY_CONFLICT"


async def test_practice_area_linked_to_user(client, seeded, admin_headers) -> None:
    await client.post(
        "/api/users",
        headers=admin_headers,
        json={
            "email": "pa@firm.co.ke",
            "password": "secret123",
            "name": "PA",
            "practiceAreaIds": [seeded.other_practice_area.id],
        },
    )
    response = await client.delete(
        f"/api/practice-areas/{seeded.other_practice_area.id}", headers=admin_headers
    )
    assert response.status_code == 409
    assert "assigned to users" in response.json()["message"]


async def test_case_with_assignment_then_cleanup(
    client, seeded, make_user, admin_headers
) -> None:
    member = await make_user()
    case = await _case(client, admin_headers, seeded.practice_area.id)
    await client.post(
        f"/api/cases/{case['id']}/assign", headers=admin_headers, json={"userId": member.id}
    )

    blocked = await client.delete(f"/api/cases/{case['id']}", headers=admin_headers)
    assert blocked.status_code == 409
    assert blocked.json()["message"] == (
        "Cannot delete case with existing assignments. Please remove assignments first."
    )

    await client.delete(f"/api/cases/{case['id']}/users/{member.id}", headers=admin_headers)
    assert (await client.delete(f"/api/cases/{case['id']}", headers=admin_headers)).status_code == 204


async def test_case_with_documents(client, seeded, admin_headers) -> None:
    case = await _case(client, admin_headers, seeded.practice_area.id)
    await client.post(
        "/api/documents",
        headers=admin_headers,
        data={"caseId": case["id"]},
        files={"file": ("a.txt", b"hello", "text/plain")},
    )
    response = await client.delete(f"/api/cases/{case['id']}", headers=admin_headers)
    assert response.status_code == 409
    assert "existing documents" in response.json()["message"]


async def test_user_with_cases(client, seeded, make_user, headers_for, admin_headers) -> None:
    owner = await make_user()
    await _case(client, headers_for(owner), seeded.practice_area.id)
    response = await client.delete(f"/api/users/{owner.id}", headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["message"] == (
        "Cannot delete user with existing cases. Please reassign or delete cases first."
    )


async def test_user_with_folders(client, seeded, make_user, headers_for, admin_headers) -> None:
    owner = await make_user()
    await client.post("/api/folders", headers=headers_for(owner), json={"name": "Drafts"})
    response = await client.delete(f"/api/users/{owner.id}", headers=admin_headers)
    assert response.status_code == 409
    assert "owns folders" in response.json()["message"]


async def test_folder_with_documents(client, seeded, make_user, headers_for) -> None:
    owner = await make_user()
    headers = headers_for(owner)
    folder = (await client.post("/api/folders", headers=headers, json={"name": "F"})).json()
    await client.post(
        "/api/documents",
        headers=headers,
        data={"folderId": folder["id"]},
        files={"file": ("a.txt", b"hello", "text/plain")},
    )
    response = await client.delete(f"/api/folders/{folder['id']}", headers=headers)
    assert response.status_code == 409
    assert response.json()["message"] == (
        "Cannot delete folder with existing documents. Please delete or move documents first."
    )


async def test_user_with_assignment_then_cleanup(
    client, seeded, make_user, admin_headers
) -> None:
    member = await make_user()
    case = await _case(client, admin_headers, seeded.practice_area.id)
    await client.post(
        f"/api/cases/{case['id']}/assign", headers=admin_headers, json={"userId": member.id}
    )

    blocked = await client.delete(f"/api/users/{member.id}", headers=admin_headers)
    assert blocked.status_code == 409
    assert blocked.json()["message"] == (
        "Cannot delete user with case assignments. Please remove case assignments first."
    )

    await client.delete(f"/api/cases/{case['id']}/users/{member.id}", headers=admin_headers)
    assert (await client.delete(f"/api/users/{member.id}", headers=admin_headers)).status_code == 204


async def test_user_with_uploads_then_cleanup(
    client, seeded, make_user, headers_for, admin_headers
) -> None:
    member = await make_user()
    case = await _case(client, admin_headers, seeded.practice_area.id)
    await client.post(
        f"/api/cases/{case['id']}/assign", headers=admin_headers, json={"userId": member.id}
    )
    upload = await client.post(
        "/api/documents",
        headers=headers_for(member),
        data={"caseId": case["id"]},
        files={"file": ("brief.txt", b"hello", "text/plain")},
    )
    assert upload.status_code == 201
    await client.delete(f"/api/cases/{case['id']}/users/{member.id}", headers=admin_headers)

    blocked = await client.delete(f"/api/users/{member.id}", headers=admin_headers)
    assert blocked.status_code == 409
    assert blocked.json()["message"] == (
        "Cannot delete user who has uploaded documents. "
        "Please reassign or delete documents first."
    )

    removed = await client.delete(f"/api/documents/{upload.json()['id']}", headers=admin_headers)
    assert removed.status_code == 204
    assert (await client.delete(f"/api/users/{member.id}", headers=admin_headers)).status_code == 204
