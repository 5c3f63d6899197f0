"""Health Probes — liveness plus a readiness check over the resource tables.

Invariants:
    - GET /api/health/ answers 200 while the process is up
    - GET /api/health/ready counts the rows of every resource table; a table
      that cannot be queried is named in the body and the answer is 503
    - Each table is queried in its own session so one failure cannot mask another
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

import devhouse.infrastructure.database as db_module
from devhouse.core.errors import DatabaseError
from devhouse.services.resources import ALL_RESOURCES

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "alive"}


@router.get("/ready")
async def readiness():
    """Row counts per resource table, or 503 naming the unreachable ones."""
    manager = db_module.db_manager
    tables = [spec.model.__tablename__ for spec in ALL_RESOURCES]
    if manager is None:
        return _not_ready(tables)

    counts: dict[str, int] = {}
    unreachable: list[str] = []
    for spec in ALL_RESOURCES:
        table = spec.model.__tablename__
        try:
            async with manager.session() as db:
                result = await db.execute(
                    select(func.count()).select_from(spec.model),
                )
                counts[table] = result.scalar_one()
        except DatabaseError as e:
            logger.error(f"Readiness: {table} unreachable: {e.message}")
            unreachable.append(table)

    if unreachable:
        return _not_ready(unreachable)
    return {"status": "ready", "tables": counts}


def _not_ready(tables: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "unreachable": tables},
    )
