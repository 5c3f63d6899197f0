"""End-to-end scenarios across resources."""


async def test_team_role_developer_scenario(client, auth_headers):
    team = await client.post("/api/Team", json={"name": "Eng"}, headers=auth_headers)
    assert team.json()["id"] == 1
    role = await client.post("/api/Role", json={"name": "SWE"}, headers=auth_headers)
    assert role.json()["id"] == 1

    dev = await client.post("/api/Developer", json={
        "firstname": "John", "lastname": "Doe", "teamId": 1, "roleId": 1,
    }, headers=auth_headers)
    assert dev.status_code == 201
    assert "id" in dev.json()
    assert dev.json()["firstname"] == "John"

    bad = await client.post("/api/Developer", json={
        "teamId": 99, "roleId": 1,
    }, headers=auth_headers)
    assert bad.status_code == 400
    assert bad.json()["Message"].startswith("Invalid TeamId")


async def test_project_type_project_scenario(client, auth_headers):
    await client.post("/api/Team", json={"name": "Eng"}, headers=auth_headers)
    pt = await client.post("/api/ProjectType", json={"name": "Web"}, headers=auth_headers)
    assert pt.json()["id"] == 1

    project = await client.post("/api/Project", json={
        "name": "Site", "teamId": 1, "projectTypeId": 1,
    }, headers=auth_headers)
    assert project.status_code == 201

    mismatch = await client.put(
        "/api/ProjectType/updateprojecttype/1", json={"id": 2, "name": "Web"},
        headers=auth_headers,
    )
    assert mismatch.status_code == 400
