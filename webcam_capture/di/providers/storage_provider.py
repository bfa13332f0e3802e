import logging
from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings, get_settings
from ...domain.repositories.image_storage import ImageStorage
from ...infrastructure.http_client_factory import get_shared_http_client
from ...infrastructure.storage.local_storage import LocalImageStorage
from ...infrastructure.storage.supabase_storage import SupabaseImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class StorageProvider:
    """Blob storage provider - selects the ImageStorage backend from settings"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register settings, the shared HTTP client and the ImageStorage backend.
        STORAGE_BACKEND=local writes to disk; anything else uses Supabase Storage.
        """
        # Settings and HTTP client are shared by storage and capture
        try:
            container.get(Settings)
        except ValueError:
            container.register_singleton(Settings, get_settings())
        try:
            container.get(httpx.AsyncClient)
        except ValueError:
            container.register_singleton(httpx.AsyncClient, get_shared_http_client())
        
        settings: Settings = container.get(Settings)
        
        if settings.storage_backend == "local":
            storage: ImageStorage = LocalImageStorage(
                base_dir=settings.local_storage_dir,
                public_base_url=settings.public_base_url,
            )
        else:
            if not settings.storage_url or not settings.storage_service_key:
                logger.warning(
                    "STORAGE_URL / STORAGE_SERVICE_KEY not configured - every upload will fail"
                )
            storage = SupabaseImageStorage(
                base_url=settings.storage_url,
                service_key=settings.storage_service_key,
                bucket=settings.storage_bucket,
                http_client=container.get(httpx.AsyncClient),
            )
        
        container.register_singleton(ImageStorage, storage)
