"""Health probes — liveness and per-table readiness."""

from devhouse.models import Project


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {"status": "alive"}


async def test_readiness_counts_each_resource_table(client, seed):
    await seed("Team", {"name": "Eng"})
    await seed("Role", {"name": "SWE"})
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["tables"] == {
        "teams": 1, "roles": 1, "project_types": 0, "developers": 0, "projects": 0,
    }


async def test_readiness_names_unreachable_table(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Project.__table__.drop)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "unreachable": ["projects"]}
