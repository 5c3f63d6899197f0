"""Role ORM — job role held by developers (e.g. "Software Engineer").

Invariants:
    - name is non-null and unique
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devhouse.db.base import Base


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
