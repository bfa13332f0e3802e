# Standard library imports
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

# External package imports
import httpx

# Local application imports
from ...core.security import (
    ALLOWED_DOMAINS,
    MAX_IMAGE_SIZE,
    is_allowed_domain,
    is_valid_image_content_type,
    is_within_size_limit,
)
from ...domain.exceptions import (
    DisallowedDomainError,
    InvalidContentTypeError,
    PayloadTooLargeError,
    UpstreamUnreachableError,
)
from ...domain.models.camera import Camera

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5


@dataclass(frozen=True)
class CapturedImage:
    """Raw image bytes produced by a source adapter"""
    data: bytes
    content_type: Optional[str]

    @property
    def size(self) -> int:
        return len(self.data)


class SourceAdapter(ABC):
    """
    Base class for camera source adapters.

    Subclasses produce image bytes for one camera. Every download goes through
    ``_download_image``, which enforces the domain allowlist (including on
    redirect hops), the 2xx check, the image content-type check and the
    size ceiling. Each failure raises a distinct PerCameraError subtype.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        allowed_domains: Sequence[str] = ALLOWED_DOMAINS,
        max_image_bytes: int = MAX_IMAGE_SIZE,
        fetch_timeout: float = 10.0,
    ) -> None:
        """
        Initialize source adapter.

        Args:
            http_client: Shared async HTTP client
            allowed_domains: Hosts that may be fetched from
            max_image_bytes: Payload ceiling
            fetch_timeout: Timeout in seconds for image downloads
        """
        self.http_client = http_client
        self.allowed_domains = tuple(allowed_domains)
        self.max_image_bytes = max_image_bytes
        self.fetch_timeout = fetch_timeout

    @abstractmethod
    async def fetch_image(self, camera: Camera) -> CapturedImage:
        """Produce image bytes for the camera or raise a PerCameraError."""

    async def _download_image(self, url: str, camera_name: str) -> CapturedImage:
        """
        Download an image from an allowlisted URL.

        Redirects are followed manually and each target must pass the
        allowlist before it is requested.

        Raises:
            DisallowedDomainError: URL or a redirect target is not allowlisted
            UpstreamUnreachableError: Network error, non-2xx, or too many redirects
            InvalidContentTypeError: Response is not declared as image/*
            PayloadTooLargeError: Body exceeds max_image_bytes
        """
        for _ in range(MAX_REDIRECTS + 1):
            if not is_allowed_domain(url, self.allowed_domains):
                raise DisallowedDomainError(f"URL domain not in allowlist for camera {camera_name}")

            try:
                async with self.http_client.stream(
                    "GET", url, timeout=self.fetch_timeout, follow_redirects=False
                ) as response:
                    if response.is_redirect and response.next_request is not None:
                        url = str(response.next_request.url)
                        logger.info(f"Following redirect for {camera_name}")
                        continue

                    if not response.is_success:
                        raise UpstreamUnreachableError(
                            f"Failed to fetch image for {camera_name}: HTTP {response.status_code}",
                            status_code=response.status_code,
                        )

                    content_type = response.headers.get("content-type")
                    if not is_valid_image_content_type(content_type):
                        raise InvalidContentTypeError(
                            f"Invalid content type for {camera_name}: {content_type}"
                        )

                    declared_length = response.headers.get("content-length", "")
                    if declared_length.isdigit() and not is_within_size_limit(
                        int(declared_length), self.max_image_bytes
                    ):
                        raise PayloadTooLargeError(
                            f"Image too large for {camera_name}: {declared_length} bytes declared"
                        )

                    data = await self._read_limited(response, camera_name)
                    return CapturedImage(data=data, content_type=content_type)
            except httpx.HTTPError as e:
                raise UpstreamUnreachableError(
                    f"Request failed for {camera_name}: {type(e).__name__}"
                ) from e

        raise UpstreamUnreachableError(f"Too many redirects for {camera_name}")

    async def _read_limited(self, response: httpx.Response, camera_name: str) -> bytes:
        """Read the body, aborting as soon as it exceeds the size ceiling."""
        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if not is_within_size_limit(len(buffer), self.max_image_bytes):
                raise PayloadTooLargeError(
                    f"Image too large for {camera_name}: more than {self.max_image_bytes} bytes"
                )
        return bytes(buffer)
