from abc import ABC, abstractmethod


class ImageStorage(ABC):
    """Blob storage interface for snapshot images"""

    @abstractmethod
    async def upload(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_control: str,
    ) -> None:
        """Store bytes under key. Raises StorageWriteError on failure."""
        pass

    @abstractmethod
    def get_public_url(self, key: str) -> str:
        """Public locator of the object stored under key"""
        pass
