"""DevHouse API Package — organisational CRUD service (teams, roles, developers, projects).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
