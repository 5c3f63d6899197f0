"""Auth Route — POST /api/Auth/token mints a bearer token.

Invariants:
    - No input, no persistence; response body is the bare JSON string token
"""

import logging

from fastapi import APIRouter, Depends

from devhouse.api.security import get_token_issuer
from devhouse.core.protocols import TokenIssuer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Auth", tags=["auth"])


@router.post("/token", response_model=str)
async def generate_token(issuer: TokenIssuer = Depends(get_token_issuer)):
    """Generate a signed JWT for calling mutating endpoints."""
    return issuer.issue_token()
