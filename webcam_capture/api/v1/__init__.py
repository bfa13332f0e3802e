from .capture_controller import router as capture_router
from .snapshot_controller import router as snapshot_router
from .health_controller import router as health_router


__all__ = ["capture_router", "snapshot_router", "health_router"]
