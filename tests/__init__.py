# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the FoodShare API:
# - test_models.py: Pydantic model validation and wire format
# - test_auth_service.py: Password hashing, tokens, register/login
# - test_donation_service.py: Donation lifecycle and role checks
# - test_stats_service.py: Dashboard statistics
# - test_api.py: HTTP endpoints end to end
#
# Run tests with: pytest
# =============================================================================
