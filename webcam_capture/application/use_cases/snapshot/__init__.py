from .list_snapshots import ListSnapshotsUseCase

__all__ = [
    "ListSnapshotsUseCase",
]
