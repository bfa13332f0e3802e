from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.snapshot_repository import SnapshotRepository
from ...infrastructure.db.mongo_camera_repository import MongoCameraRepository
from ...infrastructure.db.mongo_snapshot_repository import MongoSnapshotRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        camera_collection = container.get("camera_collection")
        snapshot_collection = container.get("snapshot_collection")
        
        container.register_singleton(
            CameraRepository,
            MongoCameraRepository(camera_collection=camera_collection)
        )
        
        container.register_singleton(
            SnapshotRepository,
            MongoSnapshotRepository(snapshot_collection=snapshot_collection)
        )
