# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for account operations:
# - UserType: Role enum (donor or receiver)
# - User: A stored account, as read from the users table
# - RegisterRequest / LoginRequest: Request bodies
# - UserSummary / UserProfile: What we send back (never the password hash)
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .base import CamelModel


class UserType(str, Enum):
    """
    Account role.

    - donor: May create donations and list their own
    - receiver: May claim donations and list their claims
    """
    DONOR = "donor"
    RECEIVER = "receiver"


class User(BaseModel):
    """
    A user account as stored in the users table.

    Immutable after creation. Includes the bcrypt password hash, so this
    model must never be returned directly from an endpoint.
    """
    id: str
    name: str
    email: str
    phone: str
    address: str
    user_type: UserType
    password_hash: str
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "User":
        """Build a User from a users table row."""
        return cls.model_validate(row)


# =============================================================================
# Requests
# =============================================================================

class RegisterRequest(CamelModel):
    """
    Body of POST /api/register.

    Example:
        {
            "name": "Dana",
            "email": "d@x.com",
            "password": "s3cret",
            "phone": "555-0100",
            "userType": "donor",
            "address": "1 Main St"
        }
    """
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Login email (case-sensitive)")
    password: str = Field(..., min_length=1, description="Plaintext password")
    phone: str = Field(..., min_length=1, description="Contact phone number")
    user_type: UserType = Field(..., description="Account role: donor or receiver")
    address: str = Field(..., min_length=1, description="Free-text address")


class LoginRequest(CamelModel):
    """Body of POST /api/login."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# =============================================================================
# Responses
# =============================================================================

class UserSummary(CamelModel):
    """Public identity of a user."""
    id: str
    name: str
    email: str
    user_type: UserType

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            user_type=user.user_type,
        )


class UserProfile(UserSummary):
    """Public identity plus contact details, returned on login."""
    phone: str
    address: str

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            user_type=user.user_type,
            phone=user.phone,
            address=user.address,
        )


class RegisterResponse(CamelModel):
    """Response of POST /api/register."""
    message: str = "User registered successfully"
    user: UserSummary


class LoginResponse(CamelModel):
    """Response of POST /api/login."""
    token: str = Field(..., description="Bearer token valid for 24 hours")
    user: UserProfile
