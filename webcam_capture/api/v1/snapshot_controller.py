"""
Snapshots API: read-only browsing of captured snapshots by local date and time slot.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
from datetime import date
from typing import Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException, Query, status

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.snapshot_dto import SnapshotListResponse, TimeSlotListResponse
from ...application.use_cases.snapshot.list_snapshots import ListSnapshotsUseCase
from ...core.config import Settings
from ...di.container import get_container
from ...utils.time_slots import time_slot_labels

# -----------------------------------------------------------------------------
# Logging and router
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)
router = APIRouter(tags=["snapshots"])


@router.get("/time-slots", response_model=TimeSlotListResponse)
async def list_time_slots() -> TimeSlotListResponse:
    """List the configured time slot labels in day order."""
    settings: Settings = get_container().get(Settings)
    return TimeSlotListResponse(time_slots=time_slot_labels(settings.time_slot_boundaries))


@router.get("", response_model=SnapshotListResponse)
async def list_snapshots(
    day: date = Query(..., alias="date", description="Local date, YYYY-MM-DD"),
    time_slot: Optional[str] = Query(None, description='Time slot label, e.g. "7:30 AM"'),
) -> SnapshotListResponse:
    """
    List snapshots captured on a local date, newest first.
    """
    container = get_container()
    settings: Settings = container.get(Settings)

    if time_slot is not None and time_slot not in time_slot_labels(settings.time_slot_boundaries):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown time slot: {time_slot}"
        )

    use_case: ListSnapshotsUseCase = container.get(ListSnapshotsUseCase)
    try:
        return await use_case.execute(day=day, time_slot=time_slot)
    except Exception as e:
        logger.error("Error listing snapshots: %s", e, exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to list snapshots")
