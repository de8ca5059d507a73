# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory Supabase client, stores and services
# - Provides a TestClient wired to the in-memory client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-0123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from core.models.user import RegisterRequest, UserType
from core.services import AuthService, DonationService, StatsService
from core.stores import DonationStore, UserStore
from tests.fake_supabase import FakeSupabaseClient

TEST_SECRET = os.environ["JWT_SECRET_KEY"]


# =============================================================================
# Store / Service Fixtures
# =============================================================================

@pytest.fixture
def fake_client():
    """Empty in-memory Supabase client."""
    return FakeSupabaseClient()


@pytest.fixture
def user_store(fake_client):
    return UserStore(fake_client)


@pytest.fixture
def donation_store(fake_client):
    return DonationStore(fake_client)


@pytest.fixture
def auth_service(user_store):
    return AuthService(user_store, secret_key=TEST_SECRET)


@pytest.fixture
def donation_service(user_store, donation_store):
    return DonationService(user_store, donation_store)


@pytest.fixture
def stats_service(user_store, donation_store):
    return StatsService(user_store, donation_store)


@pytest.fixture
def make_user(auth_service):
    """Factory registering a user through AuthService."""
    def _make_user(
        name: str = "Dana",
        email: str = "d@x.com",
        user_type: UserType = UserType.DONOR,
        password: str = "s3cret-pass",
        phone: str = "555-0100",
        address: str = "1 Main St",
    ):
        return auth_service.register(RegisterRequest(
            name=name,
            email=email,
            password=password,
            phone=phone,
            user_type=user_type,
            address=address,
        ))
    return _make_user


@pytest.fixture
def donor(make_user):
    return make_user(name="D", email="d@x.com", user_type=UserType.DONOR, phone="555-0100")


@pytest.fixture
def receiver(make_user):
    return make_user(name="R", email="r@x.com", user_type=UserType.RECEIVER, phone="555-0200")


@pytest.fixture
def bread_payload():
    """Donation body in wire format."""
    return {
        "foodName": "Bread",
        "quantity": "5 loaves",
        "category": "Bakery",
        "pickupAddress": "1 Main St",
        "expiryTime": "2025-01-01T18:00",
    }


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def api_client(fake_client):
    """TestClient whose Supabase client is the in-memory fake."""
    from app.dependencies import get_supabase_client
    from app.main import app

    app.dependency_overrides[get_supabase_client] = lambda: fake_client
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()
