# =============================================================================
# app/routers/donations.py - Donation Endpoints
# =============================================================================
# Handles posting, listing and claiming donations.
# Listing available donations is public; everything else needs a bearer
# token, and the caller's role decides what they may do.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Body, Path, status

from app.auth import CurrentUserId
from app.dependencies import DonationServiceDep
from core.models.donation import Donation, DonationActionResponse, DonationCreate
from core.models.user import UserType

router = APIRouter()


@router.post(
    "",
    response_model=DonationActionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_donation(
    user_id: CurrentUserId,
    donations: DonationServiceDep,
    payload: Annotated[DonationCreate | None, Body()] = None,
):
    """
    Post a new donation (donors only).

    The donor's name and phone are copied onto the donation. A missing body
    is treated as an empty one, so the role check still answers first.
    """
    if payload is None:
        payload = DonationCreate()
    donation = donations.create_donation(user_id, payload)
    return DonationActionResponse(message="Donation created successfully", donation=donation)


@router.get("", response_model=list[Donation])
def list_available_donations(donations: DonationServiceDep):
    """List donations that can still be claimed, newest first."""
    return donations.list_available()


@router.get("/my-donations", response_model=list[Donation])
def list_my_donations(user_id: CurrentUserId, donations: DonationServiceDep):
    """List the calling donor's donations in any status, newest first."""
    donations.require_role(user_id, UserType.DONOR, "Only donors can view their donations")
    return donations.list_for_donor(user_id)


@router.get("/claimed", response_model=list[Donation])
def list_claimed_donations(user_id: CurrentUserId, donations: DonationServiceDep):
    """List donations the calling receiver has claimed, newest first."""
    donations.require_role(user_id, UserType.RECEIVER, "Only receivers can view claimed items")
    return donations.list_claimed_by_receiver(user_id)


@router.put("/{donation_id}/claim", response_model=DonationActionResponse)
def claim_donation(
    donation_id: Annotated[str, Path(description="Donation ID")],
    user_id: CurrentUserId,
    donations: DonationServiceDep,
):
    """
    Claim an available donation (receivers only).

    Only one receiver can ever claim a given donation; later attempts get
    400 "This donation is no longer available".
    """
    donation = donations.claim_donation(user_id, donation_id)
    return DonationActionResponse(message="Donation claimed successfully", donation=donation)
