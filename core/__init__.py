# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for data validation
# - stores/: Table access (users, donations) through the Supabase client
# - services/: Auth, donation lifecycle and statistics
#
# Code in this package should NOT import from FastAPI routing code.
# Services get their stores and secrets through their constructors, which
# keeps them testable against a fake client.
# =============================================================================
