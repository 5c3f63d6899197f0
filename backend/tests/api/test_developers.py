"""Developer Routes — foreign-key checks on create, merge-style update.

Invariants:
    - teamId checked before roleId; missing reference → 400 naming the field
    - PUT keeps omitted names but always overwrites teamId/roleId (0 when omitted);
      a merged row pointing at a missing team or role is refused with 400
"""

import pytest


@pytest.fixture
async def team_and_role(seed):
    team = await seed("Team", {"name": "Eng"})
    role = await seed("Role", {"name": "SWE"})
    return team, role


async def test_create_developer(client, auth_headers, team_and_role):
    team, role = team_and_role
    res = await client.post("/api/Developer", json={
        "firstname": "John", "lastname": "Doe",
        "teamId": team["id"], "roleId": role["id"],
    }, headers=auth_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 1
    assert body["firstname"] == "John"
    assert body["teamId"] == team["id"]
    assert res.headers["location"].endswith("/api/Developer/1")


async def test_create_developer_with_unknown_team(client, auth_headers, team_and_role):
    _, role = team_and_role
    res = await client.post("/api/Developer", json={
        "teamId": 99, "roleId": role["id"],
    }, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["Message"].startswith("Invalid TeamId")
    assert (await client.get("/api/Developer")).json() == []


async def test_create_developer_with_unknown_role(client, auth_headers, team_and_role):
    team, _ = team_and_role
    res = await client.post("/api/Developer", json={
        "firstname": "Jane", "teamId": team["id"], "roleId": 42,
    }, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["Message"] == "Invalid RoleId. Role does not exist."


async def test_get_after_create_matches_payload(client, seed, team_and_role):
    team, role = team_and_role
    created = await seed("Developer", {
        "firstname": "Ada", "lastname": "Lovelace",
        "teamId": team["id"], "roleId": role["id"],
    })
    res = await client.get(f"/api/Developer/{created['id']}")
    assert res.json() == {
        "id": created["id"], "firstname": "Ada", "lastname": "Lovelace",
        "teamId": team["id"], "roleId": role["id"],
    }


async def test_update_omitting_foreign_keys_is_refused(
    client, seed, auth_headers, team_and_role,
):
    team, role = team_and_role
    dev = await seed("Developer", {
        "firstname": "John", "lastname": "Doe",
        "teamId": team["id"], "roleId": role["id"],
    })
    res = await client.put(
        f"/api/Developer/{dev['id']}", json={"lastname": "Smith"}, headers=auth_headers,
    )
    # omitted teamId/roleId merge in as 0, which references no team
    assert res.status_code == 400
    assert res.json()["Message"] == "Invalid TeamId. Team does not exist."

    unchanged = (await client.get(f"/api/Developer/{dev['id']}")).json()
    assert unchanged["lastname"] == "Doe"
    assert unchanged["teamId"] == team["id"]
    assert unchanged["roleId"] == role["id"]


async def test_partial_update_keeps_omitted_names(client, seed, auth_headers, team_and_role):
    team, role = team_and_role
    dev = await seed("Developer", {
        "firstname": "John", "lastname": "Doe",
        "teamId": team["id"], "roleId": role["id"],
    })
    res = await client.put(f"/api/Developer/{dev['id']}", json={
        "lastname": "Smith", "teamId": team["id"], "roleId": role["id"],
    }, headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["Message"] == "Developer updated successfully"

    updated = (await client.get(f"/api/Developer/{dev['id']}")).json()
    assert updated["firstname"] == "John"
    assert updated["lastname"] == "Smith"


async def test_update_to_unknown_role_is_refused(client, seed, auth_headers, team_and_role):
    team, role = team_and_role
    dev = await seed("Developer", {"teamId": team["id"], "roleId": role["id"]})
    res = await client.put(f"/api/Developer/{dev['id']}", json={
        "teamId": team["id"], "roleId": 77,
    }, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["Message"] == "Invalid RoleId. Role does not exist."
    assert (await client.get(f"/api/Developer/{dev['id']}")).json()["roleId"] == role["id"]


async def test_update_moves_developer_to_other_team(client, seed, auth_headers, team_and_role):
    team, role = team_and_role
    other = await seed("Team", {"name": "Ops"})
    dev = await seed("Developer", {
        "firstname": "John", "teamId": team["id"], "roleId": role["id"],
    })
    await client.put(f"/api/Developer/{dev['id']}", json={
        "teamId": other["id"], "roleId": role["id"],
    }, headers=auth_headers)
    updated = (await client.get(f"/api/Developer/{dev['id']}")).json()
    assert updated["teamId"] == other["id"]
    assert updated["firstname"] == "John"


async def test_update_missing_developer(client, auth_headers):
    res = await client.put("/api/Developer/8", json={"firstname": "X"}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["Message"] == "Developer not found"


async def test_delete_developer(client, seed, auth_headers, team_and_role):
    team, role = team_and_role
    dev = await seed("Developer", {"teamId": team["id"], "roleId": role["id"]})
    assert (await client.delete(f"/api/Developer/{dev['id']}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/api/Developer/{dev['id']}")).status_code == 404


async def test_create_developer_without_body_is_400(client, auth_headers):
    res = await client.post("/api/Developer", headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
