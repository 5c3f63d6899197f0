"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services)

Design Decisions:
    - One module per resource over a generated router: paths, payload schemas
      and per-resource quirks stay readable in one place
"""
