# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Services raise FoodShareException subclasses; the handlers below turn them
# into JSON bodies of the form {"message": ..., "code": ...}. Unexpected
# exceptions are logged with a traceback and surfaced as a generic 500 so that
# internal details never reach the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)


class FoodShareException(Exception):
    """
    Base exception for the FoodShare API.

    All domain exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "FOODSHARE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Exceptions (400)
# =============================================================================

class InvalidInputError(FoodShareException):
    """Raised when required fields are missing or malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            status_code=400,
            details=details,
        )


class InvalidCredentialsError(FoodShareException):
    """Raised on login failure. Deliberately doesn't say which field was wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
            status_code=400,
        )


class DuplicateEmailError(FoodShareException):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__(
            message="User already exists with this email",
            code="DUPLICATE_EMAIL",
            status_code=400,
        )


class DonationUnavailableError(FoodShareException):
    """Raised when claiming a donation that is no longer available."""

    def __init__(self, donation_id: str):
        super().__init__(
            message="This donation is no longer available",
            code="DONATION_UNAVAILABLE",
            status_code=400,
            details={"donation_id": donation_id},
        )


# =============================================================================
# Auth Exceptions (401 / 403)
# =============================================================================

class UnauthenticatedError(FoodShareException):
    """Raised when the bearer token is missing, invalid or expired."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(
            message=message,
            code="UNAUTHENTICATED",
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(FoodShareException):
    """Raised when the caller's role doesn't permit the operation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
        )


# =============================================================================
# Not Found Exceptions (404)
# =============================================================================

class UserNotFoundError(FoodShareException):
    """Raised when the authenticated user ID no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
            details={"user_id": user_id},
        )


class DonationNotFoundError(FoodShareException):
    """Raised when a donation ID doesn't exist."""

    def __init__(self, donation_id: str):
        super().__init__(
            message="Donation not found",
            code="DONATION_NOT_FOUND",
            status_code=404,
            details={"donation_id": donation_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def foodshare_exception_handler(
    request: Request,
    exc: FoodShareException
) -> JSONResponse:
    """Convert FoodShareException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Missing or malformed fields are a client error (400), reported with the
    offending field names.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "message": "All required fields must be filled",
            "code": "INVALID_INPUT",
            "details": {"errors": errors},
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing-level HTTP errors.

    Unknown paths and unsupported methods on known paths both answer 404.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"message": "Route not found", "code": "ROUTE_NOT_FOUND"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


async def supabase_client_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """The store client couldn't be created; the service is unavailable."""
    logger.error(f"Database client unavailable: {exc}")
    return JSONResponse(
        status_code=503,
        content={"message": "Database unavailable", "code": exc.code},
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", "-")
    logger.exception(
        f"Unexpected error on {request.method} {request.url.path} [{request_id}]: {exc}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error",
            "code": "INTERNAL_ERROR",
        }
    )
