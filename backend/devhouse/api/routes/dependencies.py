"""Route Dependencies — per-request ResourceService providers.

Invariants:
    - Each request gets its own ResourceService bound to its own AsyncSession
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devhouse.core.resource_spec import ResourceSpec
from devhouse.infrastructure.database import get_db
from devhouse.services.resource_service import ResourceService


def service_for(spec: ResourceSpec) -> Callable[..., ResourceService]:
    """Build a FastAPI dependency yielding a ResourceService for ``spec``."""

    def _provide(db: AsyncSession = Depends(get_db)) -> ResourceService:
        return ResourceService(db, spec)

    return _provide
