# =============================================================================
# core/models/stats.py - Dashboard Statistics Schemas
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ActivityEntry(CamelModel):
    """One line of the recent activity feed."""
    action: str = Field(..., description="e.g. 'Dana donated Bread - Status: available'")
    timestamp: datetime | None = None


class Stats(CamelModel):
    """
    Point-in-time counts for the dashboard.

    Counts are read one after another, so they are not guaranteed to be
    mutually consistent under concurrent writes.
    """
    total_donations: int = Field(default=0, ge=0)
    active_donations: int = Field(default=0, ge=0)
    claimed_donations: int = Field(default=0, ge=0)
    total_users: int = Field(default=0, ge=0)
    donors: int = Field(default=0, ge=0)
    receivers: int = Field(default=0, ge=0)
    recent_activity: list[ActivityEntry] = Field(default_factory=list)
