"""Bearer Security — token issuer dependency and the guard for mutating routes.

Invariants:
    - Mutating routes declare require_bearer_token; read routes never do
    - Missing or invalid tokens raise AuthenticationError (401 via global handler)
    - settings.auth_enabled=False turns the guard into a no-op

Design Decisions:
    - get_token_issuer is the single seam for swapping the identity provider
      (app.dependency_overrides[get_token_issuer] = ...)
    - HTTPBearer(auto_error=False): the 401 body keeps the DevHouseError shape
"""

from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from devhouse.config import get_settings
from devhouse.core.errors import AuthenticationError
from devhouse.core.protocols import TokenIssuer
from devhouse.infrastructure.token_issuer import StaticSecretTokenIssuer

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_issuer() -> TokenIssuer:
    return StaticSecretTokenIssuer.from_settings(get_settings())


async def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict[str, Any]:
    """Return the verified claims, or {} when auth is disabled."""
    if not get_settings().auth_enabled:
        return {}
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return issuer.verify(credentials.credentials)
