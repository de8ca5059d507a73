# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Registration, login and bearer-token authentication.
#
# Usage:
#   from app.auth import CurrentUserId
#
#   @router.get("/protected")
#   def protected(user_id: CurrentUserId):
#       return {"user_id": user_id}
# =============================================================================

from app.auth.dependencies import CurrentUserId, get_current_user_id

__all__ = [
    "CurrentUserId",
    "get_current_user_id",
]
