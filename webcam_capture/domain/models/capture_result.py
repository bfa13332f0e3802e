from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class CaptureResult:
    """Outcome of one camera within a capture run (never persisted)"""

    camera_name: str
    success: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class CaptureSummary:
    """Aggregate counts returned to the caller of a capture run"""

    processed: int
    successful: int

    @classmethod
    def from_results(cls, results: Iterable[CaptureResult]) -> "CaptureSummary":
        processed = 0
        successful = 0
        for result in results:
            processed += 1
            if result.success:
                successful += 1
        return cls(processed=processed, successful=successful)
