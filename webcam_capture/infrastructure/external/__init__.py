"""External service clients: camera source adapters and the render provider"""

from .base_source_adapter import CapturedImage, SourceAdapter
from .direct_fetch_adapter import DirectFetchAdapter
from .render_fetch_adapter import RenderFetchAdapter
from .source_adapter_registry import SourceAdapterRegistry

__all__ = [
    "CapturedImage",
    "SourceAdapter",
    "DirectFetchAdapter",
    "RenderFetchAdapter",
    "SourceAdapterRegistry",
]
