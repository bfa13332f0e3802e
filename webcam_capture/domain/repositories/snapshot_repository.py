from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.snapshot import Snapshot


class SnapshotRepository(ABC):
    """Repository interface - defines contract for snapshot data access"""

    @abstractmethod
    async def create(self, snapshot: Snapshot) -> str:
        """Create snapshot and return snapshot_id"""
        pass

    @abstractmethod
    async def list_by_window(
        self,
        start_utc: datetime,
        end_utc: datetime,
        time_slot: Optional[str] = None,
    ) -> List[Snapshot]:
        """List snapshots captured in [start_utc, end_utc), newest first"""
        pass
