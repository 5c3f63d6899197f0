"""Static-Secret Token Issuer — HS256 bearer tokens signed with a configured secret.

Invariants:
    - Every token carries sub, jti (fresh uuid4), iss, aud, exp
    - exp = issuance time + expiry_minutes (60 when not configured)
    - verify() raises AuthenticationError, never a PyJWT exception

Design Decisions:
    - No user store: the subject is a fixed identifier, the token is a capability
      minted from configuration
    - PyJWT over hand-rolled HMAC: claim validation (exp/iss/aud) comes for free
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import jwt

from devhouse.config import Settings
from devhouse.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_MINUTES = 60
TOKEN_SUBJECT = "testuser"
ALGORITHM = "HS256"


class StaticSecretTokenIssuer:
    """TokenIssuer backed by a symmetric key from settings."""

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiry_minutes: int | None = None,
    ):
        self._secret_key = secret_key
        self.issuer = issuer
        self.audience = audience
        self.expiry_minutes = expiry_minutes or DEFAULT_EXPIRY_MINUTES

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticSecretTokenIssuer":
        return cls(
            secret_key=settings.jwt_secret_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expiry_minutes=settings.jwt_expiry_minutes,
        )

    def issue_token(self) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": TOKEN_SUBJECT,
            "jti": str(uuid4()),
            "iss": self.issuer,
            "aud": self.audience,
            "exp": now + timedelta(minutes=self.expiry_minutes),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)
        logger.info(f"Issued token {claims['jti']}")
        return token

    def verify(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                audience=self.audience,
                issuer=self.issuer,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected bearer token: {e}")
            raise AuthenticationError("Invalid token")
