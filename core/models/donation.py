# =============================================================================
# core/models/donation.py - Donation Schemas
# =============================================================================
# These models define the API contract for donation operations:
# - DonationStatus: Lifecycle enum
# - DonationCreate: Input for posting a donation
# - Donation: A stored donation, also the shape returned to clients
# - DonationActionResponse: {message, donation} envelope for create/claim
#
# Donor and receiver identity (name, phone) are copied onto the donation when
# it is created/claimed, so listings never need to join against users.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .base import CamelModel


class DonationStatus(str, Enum):
    """
    Lifecycle of a donation.

    Flow: available -> claimed

    - available: Posted by a donor, open for claiming
    - claimed: Taken by exactly one receiver
    - completed: Reserved; no operation moves a donation here yet
    """
    AVAILABLE = "available"
    CLAIMED = "claimed"
    COMPLETED = "completed"


# Fields a donor must fill in (snake_case names; aliases are camelCase)
REQUIRED_DONATION_FIELDS = (
    "food_name",
    "quantity",
    "category",
    "pickup_address",
    "expiry_time",
)


def _as_text(value: Any) -> str | None:
    """Cast a JSON scalar to text; None for null and nested values."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


class DonationCreate(CamelModel):
    """
    Body of POST /api/donations.

    Presence of the required fields is checked by DonationService after the
    caller's role, so a receiver is refused with 403 whatever they send.
    Parsing is lenient for that reason: numbers and booleans become text
    ("quantity": 5 -> "5"), while nulls and nested values count as not
    filled in.

    Example:
        {
            "foodName": "Bread",
            "quantity": "5 loaves",
            "category": "Bakery",
            "pickupAddress": "1 Main St",
            "expiryTime": "2025-01-01T18:00"
        }
    """
    food_name: str = Field(default="", description="What is being donated")
    quantity: str = Field(default="", description="Free-text amount, e.g. '5 loaves'")
    category: str = Field(default="", description="Food category")
    description: str | None = Field(default=None, description="Optional details")
    pickup_address: str = Field(default="", description="Where to collect the food")
    expiry_time: str = Field(default="", description="Free-text expiry, e.g. '2025-01-01T18:00'")

    @model_validator(mode="before")
    @classmethod
    def _object_body(cls, data: Any) -> Any:
        # Non-object JSON bodies are treated as empty; None is left to the
        # Optional body parameter.
        if data is None or isinstance(data, (dict, BaseModel)):
            return data
        return {}

    @field_validator(*REQUIRED_DONATION_FIELDS, mode="before")
    @classmethod
    def _coerce_required_text(cls, value: Any) -> str:
        text = _as_text(value)
        return "" if text is None else text

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str | None:
        return _as_text(value)

    def missing_fields(self) -> list[str]:
        """Camel-cased names of required fields that are empty."""
        fields = type(self).model_fields
        return [
            fields[name].alias or name
            for name in REQUIRED_DONATION_FIELDS
            if not getattr(self, name)
        ]


class Donation(CamelModel):
    """
    A donation as stored in the donations table and returned to clients.

    The identifier is serialized as "_id" to keep the wire format existing
    clients already consume.
    """
    id: str = Field(..., alias="_id")
    donor_id: str
    donor_name: str
    donor_phone: str
    food_name: str
    quantity: str
    category: str
    description: str | None = None
    pickup_address: str
    expiry_time: str
    status: DonationStatus = DonationStatus.AVAILABLE
    receiver_id: str | None = None
    receiver_name: str | None = None
    receiver_phone: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Donation":
        """Build a Donation from a donations table row."""
        return cls.model_validate(row)


class DonationActionResponse(CamelModel):
    """Response of create and claim."""
    message: str
    donation: Donation
