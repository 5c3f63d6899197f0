"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer identity keys, assigned by the database on insert

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from devhouse.models.team import Team  # noqa: F401
from devhouse.models.role import Role  # noqa: F401
from devhouse.models.project_type import ProjectType  # noqa: F401
from devhouse.models.developer import Developer  # noqa: F401
from devhouse.models.project import Project  # noqa: F401
