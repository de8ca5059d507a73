# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for account registration and login.
# =============================================================================

import logging

from fastapi import APIRouter, status

from app.dependencies import AuthServiceDep
from core.models.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfile,
    UserSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(request: RegisterRequest, auth: AuthServiceDep) -> RegisterResponse:
    """
    Register a donor or receiver account.

    Raises:
        400: If a field is missing or the email is already registered
    """
    user = auth.register(request)
    return RegisterResponse(user=UserSummary.from_user(user))


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, auth: AuthServiceDep) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    The token is valid for 24 hours. Send it as
    `Authorization: Bearer <token>`.

    Raises:
        400: If the email is unknown or the password is wrong
    """
    token, user = auth.login(request.email, request.password)
    return LoginResponse(token=token, user=UserProfile.from_user(user))
