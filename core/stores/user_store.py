# =============================================================================
# core/stores/user_store.py - Credential Store
# =============================================================================
# Reads and writes the users table. Email uniqueness is enforced by the
# table's unique constraint; a violating insert raises DuplicateKeyError.
#
# Users are never updated or deleted.
# =============================================================================

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import Client

from lib.supabase_client import DuplicateKeyError, first_row, is_unique_violation
from lib.utils import is_valid_uuid, normalize_uuid, utc_now_iso

logger = logging.getLogger(__name__)

TABLE = "users"


class UserStore:
    """Access to the users table."""

    def __init__(self, client: Client):
        self._client = client

    def find_by_email(self, email: str) -> dict[str, Any] | None:
        """Exact (case-sensitive) email lookup."""
        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        return first_row(response)

    def find_by_id(self, user_id: str) -> dict[str, Any] | None:
        """
        Look up a user by primary key.

        IDs that aren't UUIDs can't exist in the table, so they are reported
        as absent without a round trip.
        """
        if not is_valid_uuid(user_id):
            return None

        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("id", normalize_uuid(user_id))
            .limit(1)
            .execute()
        )
        return first_row(response)

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new user.

        Args:
            fields: Column values (name, email, password_hash, phone,
                user_type, address)

        Returns:
            The inserted row, including generated id and created_at

        Raises:
            DuplicateKeyError: If the email is already registered
        """
        data = {"created_at": utc_now_iso(), **fields}

        try:
            response = self._client.table(TABLE).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateKeyError(TABLE, e.message) from e
            raise

        row = first_row(response)
        if row is None:
            raise RuntimeError("Insert into users returned no data")

        logger.debug(f"Inserted user {row['id']}")
        return row

    def count(self, user_type: str | None = None) -> int:
        """Count users, optionally of one type."""
        query = self._client.table(TABLE).select("id", count="exact", head=True)
        if user_type:
            query = query.eq("user_type", user_type)
        return query.execute().count or 0
