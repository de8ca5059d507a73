# =============================================================================
# core/stores/ - Table Access Layer
# =============================================================================
# Thin wrappers around the Supabase query builder, one per table. Each store
# is constructed with an explicit client; none of them hold global state.
# =============================================================================

from .user_store import UserStore
from .donation_store import DonationStore

__all__ = [
    "UserStore",
    "DonationStore",
]
