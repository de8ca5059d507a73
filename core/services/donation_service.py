# =============================================================================
# core/services/donation_service.py - Donation Lifecycle Business Logic
# =============================================================================
# Role-gated donation operations:
# - Donors create donations (status: available)
# - Receivers claim them (available -> claimed, exactly once)
#
# Donor/receiver name and phone are copied onto the donation at the moment
# of the transition.
# =============================================================================

import logging

from app.exceptions import (
    DonationNotFoundError,
    DonationUnavailableError,
    ForbiddenError,
    InvalidInputError,
    UserNotFoundError,
)
from core.models.donation import Donation, DonationCreate, DonationStatus
from core.models.user import User, UserType
from core.stores.donation_store import DonationStore
from core.stores.user_store import UserStore

logger = logging.getLogger(__name__)


class DonationService:
    """
    Service for the donation lifecycle.

    Provides a clean interface between API routes and the two stores.
    """

    def __init__(self, users: UserStore, donations: DonationStore):
        self._users = users
        self._donations = donations

    def require_role(self, user_id: str, role: UserType, message: str) -> User:
        """
        Load a user and check their role.

        Args:
            user_id: ID from the bearer token
            role: Role the operation needs
            message: Error message when the role doesn't match

        Raises:
            UserNotFoundError: If the user no longer exists
            ForbiddenError: If the user has another role
        """
        row = self._users.find_by_id(user_id)
        if row is None:
            raise UserNotFoundError(user_id)

        user = User.from_row(row)
        if user.user_type != role:
            logger.warning(f"User {user_id} ({user.user_type.value}) refused: {message}")
            raise ForbiddenError(message)

        return user

    def create_donation(self, donor_id: str, payload: DonationCreate) -> Donation:
        """
        Post a new donation.

        The role is checked before the payload, so a receiver is always
        refused with ForbiddenError.

        Raises:
            UserNotFoundError: If the donor doesn't exist
            ForbiddenError: If the user is not a donor
            InvalidInputError: If a required field is empty
        """
        donor = self.require_role(donor_id, UserType.DONOR, "Only donors can create donations")

        missing = payload.missing_fields()
        if missing:
            raise InvalidInputError(
                "All required fields must be filled",
                details={"missing": missing},
            )

        row = self._donations.create({
            "donor_id": donor.id,
            "donor_name": donor.name,
            "donor_phone": donor.phone,
            "food_name": payload.food_name,
            "quantity": payload.quantity,
            "category": payload.category,
            "description": payload.description,
            "pickup_address": payload.pickup_address,
            "expiry_time": payload.expiry_time,
            "status": DonationStatus.AVAILABLE.value,
        })

        donation = Donation.from_row(row)
        logger.info(f"Donation {donation.id} created by donor {donor.id}")
        return donation

    def claim_donation(self, receiver_id: str, donation_id: str) -> Donation:
        """
        Claim an available donation for a receiver.

        The status check up front gives a fast answer for the common case;
        the store's conditional update is what guarantees a single winner
        when two receivers claim at the same time.

        Raises:
            UserNotFoundError: If the receiver doesn't exist
            ForbiddenError: If the user is not a receiver
            DonationNotFoundError: If the donation doesn't exist
            DonationUnavailableError: If it was already claimed
        """
        receiver = self.require_role(
            receiver_id, UserType.RECEIVER, "Only receivers can claim donations"
        )

        current = self._donations.find_by_id(donation_id)
        if current is None:
            raise DonationNotFoundError(donation_id)

        if current.get("status") != DonationStatus.AVAILABLE.value:
            raise DonationUnavailableError(donation_id)

        row = self._donations.claim_if_available(donation_id, {
            "receiver_id": receiver.id,
            "receiver_name": receiver.name,
            "receiver_phone": receiver.phone,
        })
        if row is None:
            logger.warning(f"Donation {donation_id} was claimed concurrently; {receiver.id} lost")
            raise DonationUnavailableError(donation_id)

        donation = Donation.from_row(row)
        logger.info(f"Donation {donation.id} claimed by receiver {receiver.id}")
        return donation

    def list_available(self) -> list[Donation]:
        """Open donations, newest first."""
        rows = self._donations.list_by_status(DonationStatus.AVAILABLE)
        return [Donation.from_row(row) for row in rows]

    def list_for_donor(self, donor_id: str) -> list[Donation]:
        """All donations of a donor, newest first."""
        rows = self._donations.list_by_donor(donor_id)
        return [Donation.from_row(row) for row in rows]

    def list_claimed_by_receiver(self, receiver_id: str) -> list[Donation]:
        """All donations a receiver has claimed, newest first."""
        rows = self._donations.list_by_receiver(receiver_id)
        return [Donation.from_row(row) for row in rows]
