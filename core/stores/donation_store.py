# =============================================================================
# core/stores/donation_store.py - Donation Store
# =============================================================================
# Reads and writes the donations table.
#
# The claim transition is a single conditional UPDATE ... WHERE id = :id AND
# status = 'available'. PostgreSQL applies it atomically per row, so when two
# receivers race for the same donation only one UPDATE matches.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from core.models.donation import DonationStatus
from lib.supabase_client import first_row
from lib.utils import is_valid_uuid, normalize_uuid, utc_now_iso

logger = logging.getLogger(__name__)

TABLE = "donations"


class DonationStore:
    """Access to the donations table."""

    def __init__(self, client: Client):
        self._client = client

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Insert a donation and return the stored row."""
        data = {"created_at": utc_now_iso(), **fields}

        response = self._client.table(TABLE).insert(data).execute()
        row = first_row(response)
        if row is None:
            raise RuntimeError("Insert into donations returned no data")

        logger.debug(f"Inserted donation {row['id']}")
        return row

    def find_by_id(self, donation_id: str) -> dict[str, Any] | None:
        """Look up a donation; malformed IDs are reported as absent."""
        if not is_valid_uuid(donation_id):
            return None

        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("id", normalize_uuid(donation_id))
            .limit(1)
            .execute()
        )
        return first_row(response)

    def _list_where(self, column: str, value: str) -> list[dict[str, Any]]:
        response = (
            self._client.table(TABLE)
            .select("*")
            .eq(column, value)
            .order("created_at", desc=True)
            .execute()
        )
        return response.data or []

    def list_by_status(self, status: DonationStatus) -> list[dict[str, Any]]:
        """Donations in a given status, newest first."""
        return self._list_where("status", status.value)

    def list_by_donor(self, donor_id: str) -> list[dict[str, Any]]:
        """Donations posted by a donor, newest first."""
        if not is_valid_uuid(donor_id):
            return []
        return self._list_where("donor_id", normalize_uuid(donor_id))

    def list_by_receiver(self, receiver_id: str) -> list[dict[str, Any]]:
        """Donations claimed by a receiver, newest first."""
        if not is_valid_uuid(receiver_id):
            return []
        return self._list_where("receiver_id", normalize_uuid(receiver_id))

    def list_recent(self, limit: int = 5) -> list[dict[str, Any]]:
        """Most recently created donations in any status."""
        response = (
            self._client.table(TABLE)
            .select("id, donor_name, food_name, status, created_at")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return response.data or []

    def claim_if_available(
        self,
        donation_id: str,
        receiver: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Atomically move a donation from available to claimed.

        Args:
            donation_id: The donation UUID
            receiver: receiver_id, receiver_name and receiver_phone to stamp

        Returns:
            The updated row, or None if the donation was no longer available
            (or doesn't exist) at the moment of the update
        """
        if not is_valid_uuid(donation_id):
            return None

        response = (
            self._client.table(TABLE)
            .update({"status": DonationStatus.CLAIMED.value, **receiver})
            .eq("id", normalize_uuid(donation_id))
            .eq("status", DonationStatus.AVAILABLE.value)
            .execute()
        )
        return first_row(response)

    def count(self, status: DonationStatus | None = None) -> int:
        """Count donations, optionally in one status."""
        query = self._client.table(TABLE).select("id", count="exact", head=True)
        if status:
            query = query.eq("status", status.value)
        return query.execute().count or 0
