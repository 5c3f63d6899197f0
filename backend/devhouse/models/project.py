"""Project ORM — work item owned by a Team and classified by a ProjectType.

Invariants:
    - team_id and project_type_id reference existing rows at creation time
    - On create the resolved Team and ProjectType objects are attached, not just the ids
"""

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devhouse.db.base import Base


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    team_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id"), nullable=False,
    )
    project_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("project_types.id"), nullable=False,
    )

    team: Mapped["Team"] = relationship("Team", lazy="selectin")
    project_type: Mapped["ProjectType"] = relationship("ProjectType", lazy="selectin")
