# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - stats.py: Dashboard statistics
# - donations.py: Donation creation, listing and claiming
#
# Registration and login live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import stats
from . import donations

__all__ = [
    "health",
    "stats",
    "donations",
]
