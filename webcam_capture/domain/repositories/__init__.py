from .camera_repository import CameraRepository
from .snapshot_repository import SnapshotRepository
from .image_storage import ImageStorage

__all__ = ["CameraRepository", "SnapshotRepository", "ImageStorage"]
