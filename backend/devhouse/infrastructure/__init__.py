"""Infrastructure Layer — database sessions, token signing, logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Library exceptions are mapped to DevHouseError subclasses at this boundary
"""
