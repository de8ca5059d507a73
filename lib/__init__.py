# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory and store-level errors
# - utils.py: Shared utilities (error base class, UUID helpers, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import (
    DuplicateKeyError,
    SupabaseClientError,
    create_supabase_client,
)
from lib.utils import ApplicationError, is_valid_uuid, normalize_uuid, utc_now_iso

__all__ = [
    # Supabase
    "create_supabase_client",
    "SupabaseClientError",
    "DuplicateKeyError",
    # Utils
    "ApplicationError",
    "is_valid_uuid",
    "normalize_uuid",
    "utc_now_iso",
]
