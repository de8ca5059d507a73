# =============================================================================
# tests/test_donation_service.py - DonationService Tests
# =============================================================================
# Tests for:
# - Role-gated creation and claiming
# - Donor/receiver identity copied onto the donation
# - Single-winner claims, including a claim racing another
# - Listings (filtering and newest-first ordering)
# =============================================================================

import uuid

import pytest

from app.exceptions import (
    DonationNotFoundError,
    DonationUnavailableError,
    ForbiddenError,
    InvalidInputError,
    UserNotFoundError,
)
from core.models.donation import DonationCreate, DonationStatus
from core.models.user import UserType


@pytest.fixture
def bread(bread_payload):
    return DonationCreate.model_validate(bread_payload)


# =============================================================================
# Create Tests
# =============================================================================

class TestCreateDonation:

    def test_donor_creates_available_donation(self, donation_service, donor, bread):
        donation = donation_service.create_donation(donor.id, bread)

        assert donation.status == DonationStatus.AVAILABLE
        assert donation.food_name == "Bread"
        assert donation.donor_id == donor.id
        assert donation.donor_name == "D"
        assert donation.donor_phone == "555-0100"
        assert donation.receiver_id is None

    def test_receiver_is_forbidden(self, donation_service, receiver, bread):
        with pytest.raises(ForbiddenError) as exc_info:
            donation_service.create_donation(receiver.id, bread)

        assert exc_info.value.message == "Only donors can create donations"

    def test_receiver_is_forbidden_even_with_invalid_payload(self, donation_service, receiver):
        """Role is checked before the payload."""
        with pytest.raises(ForbiddenError):
            donation_service.create_donation(receiver.id, DonationCreate())

    def test_missing_fields_are_rejected(self, donation_service, donor, donation_store):
        payload = DonationCreate.model_validate({"foodName": "Bread", "quantity": ""})

        with pytest.raises(InvalidInputError) as exc_info:
            donation_service.create_donation(donor.id, payload)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["missing"] == [
            "quantity", "category", "pickupAddress", "expiryTime",
        ]
        assert donation_store.count() == 0

    def test_unknown_user(self, donation_service, bread):
        with pytest.raises(UserNotFoundError):
            donation_service.create_donation(str(uuid.uuid4()), bread)

    def test_malformed_user_id_is_not_found(self, donation_service, bread):
        with pytest.raises(UserNotFoundError):
            donation_service.create_donation("not-a-uuid", bread)


# =============================================================================
# Claim Tests
# =============================================================================

class TestClaimDonation:

    def test_receiver_claims(self, donation_service, donor, receiver, bread):
        created = donation_service.create_donation(donor.id, bread)

        claimed = donation_service.claim_donation(receiver.id, created.id)

        assert claimed.id == created.id
        assert claimed.status == DonationStatus.CLAIMED
        assert claimed.receiver_id == receiver.id
        assert claimed.receiver_name == "R"
        assert claimed.receiver_phone == "555-0200"
        # Donor identity is untouched by the claim
        assert claimed.donor_name == "D"

    def test_second_claim_fails(self, donation_service, donor, receiver, make_user, bread):
        other = make_user(name="R2", email="r2@x.com", user_type=UserType.RECEIVER)
        created = donation_service.create_donation(donor.id, bread)
        donation_service.claim_donation(receiver.id, created.id)

        with pytest.raises(DonationUnavailableError) as exc_info:
            donation_service.claim_donation(other.id, created.id)

        assert exc_info.value.message == "This donation is no longer available"
        # First claimant keeps it
        assert donation_service.list_claimed_by_receiver(receiver.id)[0].id == created.id
        assert donation_service.list_claimed_by_receiver(other.id) == []

    def test_lost_race_fails(self, donation_service, donation_store, donor, receiver, make_user, bread, monkeypatch):
        """
        A receiver who read the donation as available before another claim
        landed must still lose at the conditional update.
        """
        other = make_user(name="R2", email="r2@x.com", user_type=UserType.RECEIVER)
        created = donation_service.create_donation(donor.id, bread)
        stale = donation_store.find_by_id(created.id)

        donation_service.claim_donation(receiver.id, created.id)
        monkeypatch.setattr(donation_store, "find_by_id", lambda donation_id: dict(stale))

        with pytest.raises(DonationUnavailableError):
            donation_service.claim_donation(other.id, created.id)

        monkeypatch.undo()
        stored = donation_store.find_by_id(created.id)
        assert stored["receiver_id"] == receiver.id

    def test_donor_cannot_claim(self, donation_service, donor, bread):
        created = donation_service.create_donation(donor.id, bread)

        with pytest.raises(ForbiddenError) as exc_info:
            donation_service.claim_donation(donor.id, created.id)

        assert exc_info.value.message == "Only receivers can claim donations"

    def test_unknown_donation(self, donation_service, receiver):
        with pytest.raises(DonationNotFoundError):
            donation_service.claim_donation(receiver.id, str(uuid.uuid4()))

    def test_malformed_donation_id(self, donation_service, receiver):
        with pytest.raises(DonationNotFoundError):
            donation_service.claim_donation(receiver.id, "abc")


# =============================================================================
# Listing Tests
# =============================================================================

def _seed_donation(fake_client, donor, food_name, created_at, status="available", receiver_id=None):
    row = {
        "id": str(uuid.uuid4()),
        "donor_id": donor.id,
        "donor_name": donor.name,
        "donor_phone": donor.phone,
        "food_name": food_name,
        "quantity": "1",
        "category": "Misc",
        "description": None,
        "pickup_address": "1 Main St",
        "expiry_time": "tomorrow",
        "status": status,
        "receiver_id": receiver_id,
        "receiver_name": None,
        "receiver_phone": None,
        "created_at": created_at,
    }
    fake_client.tables["donations"].append(row)
    return row


class TestListings:

    def test_available_excludes_claimed_and_completed(self, donation_service, fake_client, donor):
        _seed_donation(fake_client, donor, "Bread", "2024-01-01T10:00:00+00:00")
        _seed_donation(fake_client, donor, "Soup", "2024-01-01T11:00:00+00:00", status="claimed")
        _seed_donation(fake_client, donor, "Rice", "2024-01-01T12:00:00+00:00", status="completed")

        available = donation_service.list_available()

        assert [d.food_name for d in available] == ["Bread"]
        assert all(d.status == DonationStatus.AVAILABLE for d in available)

    def test_available_newest_first(self, donation_service, fake_client, donor):
        _seed_donation(fake_client, donor, "Old", "2024-01-01T10:00:00+00:00")
        _seed_donation(fake_client, donor, "New", "2024-01-02T10:00:00+00:00")
        _seed_donation(fake_client, donor, "Middle", "2024-01-01T18:00:00+00:00")

        names = [d.food_name for d in donation_service.list_available()]

        assert names == ["New", "Middle", "Old"]

    def test_list_for_donor_only_returns_own(self, donation_service, fake_client, donor, make_user):
        other = make_user(name="D2", email="d2@x.com", user_type=UserType.DONOR)
        _seed_donation(fake_client, donor, "Mine", "2024-01-01T10:00:00+00:00")
        _seed_donation(fake_client, donor, "Mine too", "2024-01-02T10:00:00+00:00", status="claimed")
        _seed_donation(fake_client, other, "Theirs", "2024-01-03T10:00:00+00:00")

        names = [d.food_name for d in donation_service.list_for_donor(donor.id)]

        assert names == ["Mine too", "Mine"]

    def test_list_claimed_by_receiver(self, donation_service, fake_client, donor, receiver):
        _seed_donation(fake_client, donor, "Claimed", "2024-01-01T10:00:00+00:00",
                       status="claimed", receiver_id=receiver.id)
        _seed_donation(fake_client, donor, "Open", "2024-01-02T10:00:00+00:00")

        names = [d.food_name for d in donation_service.list_claimed_by_receiver(receiver.id)]

        assert names == ["Claimed"]


class TestRequireRole:

    def test_returns_user_with_matching_role(self, donation_service, donor):
        user = donation_service.require_role(donor.id, UserType.DONOR, "nope")

        assert user.id == donor.id

    def test_mismatched_role_uses_given_message(self, donation_service, donor):
        with pytest.raises(ForbiddenError) as exc_info:
            donation_service.require_role(donor.id, UserType.RECEIVER, "Only receivers can view claimed items")

        assert exc_info.value.message == "Only receivers can view claimed items"
