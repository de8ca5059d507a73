# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_service import AuthService
from .donation_service import DonationService
from .stats_service import StatsService

__all__ = [
    "AuthService",
    "DonationService",
    "StatsService",
]
