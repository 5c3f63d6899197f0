"""ProjectType Routes — unique names and full replace with id check.

Invariants:
    - PUT answers 204 on success, 400 on id mismatch, 404 on missing row
    - Both /{id} and /updateprojecttype/{id} accept the replace
"""

import pytest


async def test_create_project_type(client, auth_headers):
    res = await client.post("/api/ProjectType", json={"name": "Web"}, headers=auth_headers)
    assert res.status_code == 201
    assert res.json() == {"id": 1, "name": "Web"}
    assert res.headers["location"].endswith("/api/ProjectType/1")


async def test_duplicate_project_type_rejected(client, seed, auth_headers):
    await seed("ProjectType", {"name": "Web"})
    res = await client.post("/api/ProjectType", json={"name": "Web"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["Message"] == "this project type with name Web already exist"
    assert len((await client.get("/api/ProjectType")).json()) == 1


@pytest.mark.parametrize("path", ["/api/ProjectType/{id}", "/api/ProjectType/updateprojecttype/{id}"])
async def test_replace_project_type(client, seed, auth_headers, path):
    pt = await seed("ProjectType", {"name": "Web"})
    res = await client.put(
        path.format(id=pt["id"]), json={"id": pt["id"], "name": "Mobile"},
        headers=auth_headers,
    )
    assert res.status_code == 204
    assert (await client.get(f"/api/ProjectType/{pt['id']}")).json()["name"] == "Mobile"


async def test_replace_with_mismatched_id_rejected(client, seed, auth_headers):
    pt = await seed("ProjectType", {"name": "Web"})
    res = await client.put(
        f"/api/ProjectType/updateprojecttype/{pt['id']}",
        json={"id": pt["id"] + 1, "name": "Other"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ID_MISMATCH"
    assert (await client.get(f"/api/ProjectType/{pt['id']}")).json()["name"] == "Web"


async def test_replace_missing_project_type_returns_404(client, auth_headers):
    res = await client.put(
        "/api/ProjectType/5", json={"id": 5, "name": "Ghost"}, headers=auth_headers,
    )
    assert res.status_code == 404
    assert res.json()["Message"] == "Project Type is not found"


async def test_replace_without_name_clears_it(client, seed, auth_headers):
    pt = await seed("ProjectType", {"name": "Web"})
    res = await client.put(
        f"/api/ProjectType/{pt['id']}", json={"id": pt["id"]}, headers=auth_headers,
    )
    assert res.status_code == 204
    assert (await client.get(f"/api/ProjectType/{pt['id']}")).json()["name"] is None


async def test_delete_project_type_in_use_refused(client, seed, auth_headers):
    team = await seed("Team", {"name": "Eng"})
    pt = await seed("ProjectType", {"name": "Web"})
    await seed("Project", {"name": "Site", "teamId": team["id"], "projectTypeId": pt["id"]})
    res = await client.delete(f"/api/ProjectType/{pt['id']}", headers=auth_headers)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "RESOURCE_IN_USE"


async def test_replace_to_taken_name_rejected(client, seed, auth_headers):
    await seed("ProjectType", {"name": "Web"})
    mobile = await seed("ProjectType", {"name": "Mobile"})
    res = await client.put(
        f"/api/ProjectType/{mobile['id']}", json={"id": mobile["id"], "name": "Web"},
        headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"
    assert (await client.get(f"/api/ProjectType/{mobile['id']}")).json()["name"] == "Mobile"


async def test_replace_keeping_own_name_allowed(client, seed, auth_headers):
    pt = await seed("ProjectType", {"name": "Web"})
    res = await client.put(
        f"/api/ProjectType/{pt['id']}", json={"id": pt["id"], "name": "Web"},
        headers=auth_headers,
    )
    assert res.status_code == 204
