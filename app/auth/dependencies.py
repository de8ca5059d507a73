# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Tokens are HS256 JWTs issued by POST /api/login and carry the user's ID in
# a "userId" claim.
#
# Usage:
#   from app.auth import CurrentUserId
#
#   @router.get("/protected")
#   def protected(user_id: CurrentUserId):
#       return {"user_id": user_id}
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.dependencies import AuthServiceDep

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor. auto_error is off so a missing header reaches
# AuthService.authenticate and gets the same 401 body as a bad token.
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    auth: AuthServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """
    Extract and validate the user ID from the bearer token.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies the signature and expiry
    3. Returns the userId claim

    Raises:
        UnauthenticatedError: 401 if the token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else None
    user_id = auth.authenticate(token)
    logger.debug(f"Authenticated user: {user_id}")
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
