"""ProjectType ORM — category of project (e.g. "Web Development")."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devhouse.db.base import Base


class ProjectType(Base):
    __tablename__ = "project_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True, unique=True)
