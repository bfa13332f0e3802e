from abc import ABC, abstractmethod
from typing import List, Sequence
from ..models.camera import Camera


class CameraRepository(ABC):
    """Repository interface - defines contract for camera data access"""
    
    @abstractmethod
    async def find_active(self) -> List[Camera]:
        """Find all active cameras ordered by display_order"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, camera_ids: Sequence[str]) -> List[Camera]:
        """Find cameras by ID (any order, missing IDs are skipped)"""
        pass
