"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Token issuance behind a Protocol so a real identity provider can replace the
      static-secret issuer without touching resource services
"""

from typing import Any, Protocol


class TokenIssuer(Protocol):
    """Mints and checks bearer tokens for mutating routes."""

    def issue_token(self) -> str: ...

    def verify(self, token: str) -> dict[str, Any]: ...
