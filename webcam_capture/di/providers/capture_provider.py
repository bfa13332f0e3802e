from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings
from ...core.security import ALLOWED_DOMAINS, CaptureAuthenticator
from ...domain.constants import SourceTypes
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.image_storage import ImageStorage
from ...domain.repositories.snapshot_repository import SnapshotRepository
from ...application.use_cases.capture.run_capture import RunCaptureUseCase
from ...infrastructure.external.direct_fetch_adapter import DirectFetchAdapter
from ...infrastructure.external.render_fetch_adapter import RenderFetchAdapter
from ...infrastructure.external.source_adapter_registry import SourceAdapterRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CaptureProvider:
    """Capture provider - registers the authenticator, source adapters and capture use case"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register capture dependencies.
        Adapters are singletons sharing the pooled HTTP client; the use case
        is created on-demand via a factory.
        """
        settings: Settings = container.get(Settings)
        http_client: httpx.AsyncClient = container.get(httpx.AsyncClient)
        
        container.register_singleton(
            CaptureAuthenticator,
            CaptureAuthenticator(settings.capture_webhook_secret)
        )
        
        registry = SourceAdapterRegistry()
        registry.register(
            SourceTypes.ROUNDSHOT,
            DirectFetchAdapter(
                http_client,
                allowed_domains=ALLOWED_DOMAINS,
                max_image_bytes=settings.max_image_bytes,
                fetch_timeout=settings.direct_fetch_timeout_seconds,
            )
        )
        registry.register(
            SourceTypes.VERKADA,
            RenderFetchAdapter(
                http_client,
                api_key=settings.render_api_key,
                api_url=settings.render_api_url,
                width=settings.render_width,
                height=settings.render_height,
                image_format=settings.render_format,
                delay_ms=settings.render_delay_ms,
                render_timeout=settings.render_timeout_seconds,
                allowed_domains=ALLOWED_DOMAINS,
                max_image_bytes=settings.max_image_bytes,
                fetch_timeout=settings.direct_fetch_timeout_seconds,
            )
        )
        container.register_singleton(SourceAdapterRegistry, registry)
        
        container.register_factory(
            RunCaptureUseCase,
            lambda: RunCaptureUseCase(
                camera_repository=container.get(CameraRepository),
                snapshot_repository=container.get(SnapshotRepository),
                image_storage=container.get(ImageStorage),
                adapter_registry=container.get(SourceAdapterRegistry),
                time_slot_offset_minutes=settings.time_slot_utc_offset_minutes,
                time_slot_boundaries=settings.time_slot_boundaries,
                allowed_domains=ALLOWED_DOMAINS,
                cache_control=settings.storage_cache_control,
                concurrency=settings.capture_concurrency,
            )
        )
