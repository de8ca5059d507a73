# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for stores and services.
# These are injected into route handlers using Depends().
#
# The Supabase client is created once, lazily, from settings. Everything
# downstream receives what it needs through its constructor. Tests swap the
# client by overriding get_supabase_client.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.config import settings
from core.services import AuthService, DonationService, StatsService
from core.stores import DonationStore, UserStore
from lib.supabase_client import create_supabase_client


@lru_cache
def get_supabase_client() -> Client:
    """Get the shared Supabase client, creating it on first use."""
    return create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)


SupabaseDep = Annotated[Client, Depends(get_supabase_client)]


# -----------------------------------------------------------------------------
# Stores
# -----------------------------------------------------------------------------

def get_user_store(client: SupabaseDep) -> UserStore:
    return UserStore(client)


def get_donation_store(client: SupabaseDep) -> DonationStore:
    return DonationStore(client)


UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
DonationStoreDep = Annotated[DonationStore, Depends(get_donation_store)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------

def get_auth_service(users: UserStoreDep) -> AuthService:
    return AuthService(users, secret_key=settings.JWT_SECRET_KEY)


def get_donation_service(users: UserStoreDep, donations: DonationStoreDep) -> DonationService:
    return DonationService(users, donations)


def get_stats_service(users: UserStoreDep, donations: DonationStoreDep) -> StatsService:
    return StatsService(users, donations)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
DonationServiceDep = Annotated[DonationService, Depends(get_donation_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
