# =============================================================================
# core/services/stats_service.py - Dashboard Statistics
# =============================================================================
# Read-only aggregation over users and donations.
# =============================================================================

import logging

from core.models.donation import DonationStatus
from core.models.stats import ActivityEntry, Stats
from core.models.user import UserType
from core.stores.donation_store import DonationStore
from core.stores.user_store import UserStore

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 5


class StatsService:
    """Computes the dashboard numbers."""

    def __init__(self, users: UserStore, donations: DonationStore):
        self._users = users
        self._donations = donations

    def compute_stats(self) -> Stats:
        recent = self._donations.list_recent(RECENT_ACTIVITY_LIMIT)

        stats = Stats(
            total_donations=self._donations.count(),
            active_donations=self._donations.count(DonationStatus.AVAILABLE),
            claimed_donations=self._donations.count(DonationStatus.CLAIMED),
            total_users=self._users.count(),
            donors=self._users.count(UserType.DONOR.value),
            receivers=self._users.count(UserType.RECEIVER.value),
            recent_activity=[
                ActivityEntry(
                    action=f"{row.get('donor_name')} donated {row.get('food_name')} - Status: {row.get('status')}",
                    timestamp=row.get("created_at"),
                )
                for row in recent
            ],
        )

        logger.debug(f"Computed stats: {stats.total_donations} donations, {stats.total_users} users")
        return stats
