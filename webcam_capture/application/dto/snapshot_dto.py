from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class SnapshotCameraResponse(BaseModel):
    """Camera display fields embedded in a snapshot listing"""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    elevation_ft: Optional[int] = None


class SnapshotResponse(BaseModel):
    id: str
    image_url: str
    captured_at: datetime
    time_slot: str
    file_size_bytes: int
    camera: Optional[SnapshotCameraResponse] = None


class SnapshotListResponse(BaseModel):
    total: int = 0
    items: List[SnapshotResponse] = Field(default_factory=list)


class TimeSlotListResponse(BaseModel):
    time_slots: List[str] = Field(default_factory=list)
