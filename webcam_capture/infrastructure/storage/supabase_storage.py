# Standard library imports
import logging
from typing import Optional
from urllib.parse import quote

# External package imports
import httpx

# Local application imports
from ...domain.exceptions import StorageWriteError
from ...domain.repositories.image_storage import ImageStorage

logger = logging.getLogger(__name__)


class SupabaseImageStorage(ImageStorage):
    """
    Blob storage backed by the Supabase Storage REST API.

    Objects are written with upsert disabled, so a key is written at most once.
    The bucket is expected to exist and be public.
    """

    def __init__(
        self,
        base_url: str,
        service_key: Optional[str],
        bucket: str,
        http_client: httpx.AsyncClient,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.http_client = http_client
        self.timeout = timeout

    def _object_path(self, key: str) -> str:
        return f"{quote(self.bucket, safe='')}/{quote(key.lstrip('/'), safe='/')}"

    async def upload(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_control: str,
    ) -> None:
        """
        Upload an image to the bucket.

        Args:
            key: Object key ("<slug>/<timestamp>.jpg")
            data: Image bytes
            content_type: MIME type stored with the object
            cache_control: max-age in seconds for public reads

        Raises:
            StorageWriteError: If storage is not configured, unreachable,
                or rejects the upload
        """
        if not self.base_url or not self.service_key:
            raise StorageWriteError("Blob storage URL or service key not configured")

        url = f"{self.base_url}/storage/v1/object/{self._object_path(key)}"
        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": content_type,
            "cache-control": f"max-age={cache_control}",
            "x-upsert": "false",
        }

        try:
            response = await self.http_client.post(
                url,
                content=data,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise StorageWriteError(f"Storage request failed for {key}: {e}") from e

        if not response.is_success:
            logger.debug(f"Storage rejected {key}: {response.status_code} - {response.text}")
            raise StorageWriteError(f"Storage upload rejected for {key}: HTTP {response.status_code}")

    def get_public_url(self, key: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self._object_path(key)}"
