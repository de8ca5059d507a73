# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: Accounts, register/login requests and responses
# - donation.py: Donations and their lifecycle status
# - stats.py: Dashboard statistics
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel

from .user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    User,
    UserProfile,
    UserSummary,
    UserType,
)

from .donation import (
    REQUIRED_DONATION_FIELDS,
    Donation,
    DonationActionResponse,
    DonationCreate,
    DonationStatus,
)

from .stats import ActivityEntry, Stats

__all__ = [
    "CamelModel",
    # User
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "User",
    "UserProfile",
    "UserSummary",
    "UserType",
    # Donation
    "REQUIRED_DONATION_FIELDS",
    "Donation",
    "DonationActionResponse",
    "DonationCreate",
    "DonationStatus",
    # Stats
    "ActivityEntry",
    "Stats",
]
