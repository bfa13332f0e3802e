"""
SourceAdapterRegistry: camera source_type -> SourceAdapter lookup.
"""
import logging
from typing import Dict, List

from .base_source_adapter import SourceAdapter
from ...domain.exceptions import UnsupportedSourceTypeError
from ...domain.models.camera import Camera

logger = logging.getLogger(__name__)


class SourceAdapterRegistry:
    """Maps source type tags to configured SourceAdapter instances."""

    def __init__(self) -> None:
        self._adapters: Dict[str, SourceAdapter] = {}

    def register(self, source_type: str, adapter: SourceAdapter) -> None:
        """Register (or replace) the adapter for a source type."""
        self._adapters[source_type] = adapter
        logger.info(f"Registered source adapter for type: {source_type}")

    def get(self, source_type: str) -> SourceAdapter:
        adapter = self._adapters.get(source_type)
        if adapter is None:
            raise UnsupportedSourceTypeError(
                f"Unknown source type '{source_type}'. Registered: {self.source_types}"
            )
        return adapter

    def for_camera(self, camera: Camera) -> SourceAdapter:
        return self.get(camera.source_type)

    @property
    def source_types(self) -> List[str]:
        return list(self._adapters.keys())
