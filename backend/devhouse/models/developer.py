"""Developer ORM — a person belonging to one Team and holding one Role.

Invariants:
    - team_id and role_id reference existing rows at creation time (checked by the service)

Design Decisions:
    - Many-to-one relationships only; no back-populated collections on Team/Role,
      referencing rows are counted with explicit queries when needed
"""

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devhouse.db.base import Base


class Developer(Base):
    __tablename__ = "developers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    firstname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    lastname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    team_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id"), nullable=False,
    )
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id"), nullable=False,
    )

    team: Mapped["Team"] = relationship("Team", lazy="selectin")
    role: Mapped["Role"] = relationship("Role", lazy="selectin")
