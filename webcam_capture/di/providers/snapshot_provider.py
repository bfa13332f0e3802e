from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.snapshot_repository import SnapshotRepository
from ...application.use_cases.snapshot.list_snapshots import ListSnapshotsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SnapshotProvider:
    """Snapshot browsing provider - registers read-only snapshot use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)
        
        container.register_factory(
            ListSnapshotsUseCase,
            lambda: ListSnapshotsUseCase(
                snapshot_repository=container.get(SnapshotRepository),
                camera_repository=container.get(CameraRepository),
                time_slot_offset_minutes=settings.time_slot_utc_offset_minutes,
            )
        )
