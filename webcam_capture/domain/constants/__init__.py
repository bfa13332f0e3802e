"""Constants for domain model field names"""

from .camera_fields import CameraFields
from .snapshot_fields import SnapshotFields
from .source_types import SourceTypes

__all__ = [
    "CameraFields",
    "SnapshotFields",
    "SourceTypes",
]
