"""Team ORM — a group of developers that owns projects.

Invariants:
    - name uniqueness enforced by the service, not by a DB constraint
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devhouse.db.base import Base


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
