"""Resource Specs — the five entity kinds served by ResourceService.

Invariants:
    - Spec labels are the human-readable names used in messages ("Project Type")
    - Foreign-key labels match the camelCase-with-capital names clients see in errors
    - referenced_by lists every table holding a foreign key to the kind (delete RESTRICT)
    - Message overrides keep the per-resource wording existing clients match on

Design Decisions:
    - Module-level frozen instances: routes import them directly, no registry lookup
"""

from devhouse.core.resource_spec import ForeignKeySpec, ReferenceSpec, ResourceSpec
from devhouse.models import Developer, Project, ProjectType, Role, Team

TEAMS = ResourceSpec(
    label="Team",
    model=Team,
    scalar_fields=("name",),
    unique_field="name",
    required_on_update=("name",),
    duplicate_template="A team with the name '{value}' already exists.",
    invalid_update_text="Invalid request. Name cannot be empty.",
    referenced_by=(
        ReferenceSpec(Developer, "team_id", "developer(s)"),
        ReferenceSpec(Project, "team_id", "project(s)"),
    ),
)

ROLES = ResourceSpec(
    label="Role",
    model=Role,
    scalar_fields=("name",),
    unique_field="name",
    required_on_create=("name",),
    required_on_update=("name",),
    referenced_by=(
        ReferenceSpec(Developer, "role_id", "developer(s)"),
    ),
    invalid_update_text="Invalid request. Provide role details.",
)

# Updated through ResourceService.replace (full replace with id check)
PROJECT_TYPES = ResourceSpec(
    label="Project Type",
    model=ProjectType,
    scalar_fields=("name",),
    unique_field="name",
    duplicate_template="this project type with name {value} already exist",
    not_found_text="Project Type is not found",
    referenced_by=(
        ReferenceSpec(Project, "project_type_id", "project(s)"),
    ),
)

DEVELOPERS = ResourceSpec(
    label="Developer",
    model=Developer,
    scalar_fields=("firstname", "lastname"),
    foreign_keys=(
        ForeignKeySpec("team_id", Team, "TeamId", "Team"),
        ForeignKeySpec("role_id", Role, "RoleId", "Role"),
    ),
)

PROJECTS = ResourceSpec(
    label="Project",
    model=Project,
    scalar_fields=("name",),
    foreign_keys=(
        ForeignKeySpec("team_id", Team, "TeamId", "Team", attach_as="team"),
        ForeignKeySpec(
            "project_type_id", ProjectType, "ProjectTypeId", "Project Type",
            attach_as="project_type",
        ),
    ),
)

ALL_RESOURCES = (TEAMS, ROLES, PROJECT_TYPES, DEVELOPERS, PROJECTS)
