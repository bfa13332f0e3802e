from .camera import Camera
from .snapshot import Snapshot
from .capture_result import CaptureResult, CaptureSummary

__all__ = ["Camera", "Snapshot", "CaptureResult", "CaptureSummary"]
