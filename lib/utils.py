# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to its canonical string form.

    Accepts UUID objects and any string form UUID() parses (braces,
    "urn:uuid:" prefix, upper case, no hyphens) and returns the lowercase
    hyphenated form the database stores.

    Raises:
        ValueError: If the value is not a UUID

    Example:
        user_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        user_id = normalize_uuid("urn:uuid:550E8400-...")  # "550e8400-..."
    """
    return str(value if isinstance(value, UUID) else UUID(str(value)))


def is_valid_uuid(value: Any) -> bool:
    """Check whether a value can be used as a UUID primary key."""
    if isinstance(value, UUID):
        return True
    try:
        UUID(str(value))
    except (TypeError, ValueError):
        return False
    return True


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string (what the store expects)."""
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for library-level errors.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
