from .capture import RunCaptureUseCase
from .snapshot import ListSnapshotsUseCase

__all__ = [
    "RunCaptureUseCase",
    "ListSnapshotsUseCase",
]
