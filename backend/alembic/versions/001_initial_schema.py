"""Initial schema — teams, roles, project_types, developers, projects.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

Foreign keys use the database default (NO ACTION); the service refuses to
delete referenced rows before the database would.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=True),
    )

    op.create_table(
        "roles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False, unique=True),
    )

    op.create_table(
        "project_types",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=True, unique=True),
    )

    op.create_table(
        "developers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("firstname", sa.String(100), nullable=True),
        sa.Column("lastname", sa.String(100), nullable=True),
        sa.Column("team_id", sa.Integer, sa.ForeignKey("teams.id"), nullable=False),
        sa.Column("role_id", sa.Integer, sa.ForeignKey("roles.id"), nullable=False),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("team_id", sa.Integer, sa.ForeignKey("teams.id"), nullable=False),
        sa.Column(
            "project_type_id", sa.Integer,
            sa.ForeignKey("project_types.id"), nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("projects")
    op.drop_table("developers")
    op.drop_table("project_types")
    op.drop_table("roles")
    op.drop_table("teams")
