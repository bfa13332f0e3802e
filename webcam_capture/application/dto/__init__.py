from .capture_dto import CaptureRunResponse, CaptureErrorResponse, HealthResponse
from .snapshot_dto import (
    SnapshotCameraResponse,
    SnapshotResponse,
    SnapshotListResponse,
    TimeSlotListResponse,
)

__all__ = [
    "CaptureRunResponse",
    "CaptureErrorResponse",
    "HealthResponse",
    "SnapshotCameraResponse",
    "SnapshotResponse",
    "SnapshotListResponse",
    "TimeSlotListResponse",
]
