from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .storage_provider import StorageProvider
from .capture_provider import CaptureProvider
from .snapshot_provider import SnapshotProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "StorageProvider",
    "CaptureProvider",
    "SnapshotProvider",
]
