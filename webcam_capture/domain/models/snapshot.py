from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Snapshot:
    """Domain model for a stored webcam capture"""

    id: Optional[str]
    camera_id: str
    image_url: str
    captured_at: datetime
    time_slot: str
    file_size_bytes: int
    created_at: Optional[datetime] = None
