# =============================================================================
# app/routers/stats.py - Dashboard Statistics Endpoint
# =============================================================================

from fastapi import APIRouter

from app.dependencies import StatsServiceDep
from core.models.stats import Stats

router = APIRouter()


@router.get("/stats", response_model=Stats)
def get_stats(stats: StatsServiceDep):
    """
    Dashboard statistics.

    Returns donation and user counts plus the five most recent donations
    as a human-readable activity feed.
    """
    return stats.compute_stats()
