# =============================================================================
# lib/supabase_client.py - Supabase Client Factory
# =============================================================================
# Creates the Supabase client used by the stores and translates the
# store-level errors the rest of the code cares about.
#
# The client is not a module-level singleton: app/dependencies.py creates it
# once from settings and hands it to each store at construction.
#
# Usage:
#   from lib.supabase_client import create_supabase_client
#   client = create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import Client, create_client

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseClientError(ApplicationError):
    """Raised when the Supabase client cannot be created."""

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class DuplicateKeyError(ApplicationError):
    """Raised when an insert violates a unique constraint."""

    def __init__(self, table: str, error: str):
        super().__init__(
            message=f"Duplicate key in {table}: {error}",
            code="DUPLICATE_KEY",
            details={"table": table},
        )
        self.table = table


def create_supabase_client(url: str, service_key: str) -> Client:
    """
    Create a Supabase client.

    Uses the service_role key, which bypasses Row Level Security (RLS).
    This is appropriate for server-side operations only.

    Raises:
        SupabaseClientError: If client creation fails
    """
    try:
        client = create_client(url, service_key)
    except Exception as e:
        raise SupabaseClientError(
            message=f"Failed to create Supabase client: {e}",
            code="CLIENT_INIT_FAILED",
            suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
        ) from e

    logger.info("Supabase client initialized successfully")
    return client


def is_unique_violation(error: APIError) -> bool:
    """Check whether a PostgREST error is a unique-constraint violation."""
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def first_row(response: Any) -> dict[str, Any] | None:
    """Return the first row of a PostgREST response, or None if empty."""
    rows = response.data or []
    return rows[0] if rows else None
