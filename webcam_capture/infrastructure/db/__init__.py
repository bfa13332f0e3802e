from .mongo_connection import get_database, get_camera_collection, get_snapshot_collection, close_database
from .mongo_camera_repository import MongoCameraRepository
from .mongo_snapshot_repository import MongoSnapshotRepository

__all__ = [
    "get_database",
    "get_camera_collection",
    "get_snapshot_collection",
    "close_database",
    "MongoCameraRepository",
    "MongoSnapshotRepository",
]
