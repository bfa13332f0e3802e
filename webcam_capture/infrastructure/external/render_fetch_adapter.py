# Standard library imports
import logging
from typing import Any, Dict, Optional, Sequence

# External package imports
import httpx

# Local application imports
from .base_source_adapter import CapturedImage, SourceAdapter
from ...core.security import ALLOWED_DOMAINS, MAX_IMAGE_SIZE, is_allowed_domain
from ...domain.exceptions import (
    DisallowedDomainError,
    MissingCredentialError,
    MissingRenderResultError,
    UpstreamUnreachableError,
)
from ...domain.models.camera import Camera

logger = logging.getLogger(__name__)


class RenderFetchAdapter(SourceAdapter):
    """
    Adapter for sources that only offer an embed page (``verkada`` cameras).

    The page is rendered to a screenshot by an external render provider
    (Urlbox sync API). The provider answers with a ``renderUrl`` pointing at
    the rendered image, which must itself be allowlisted before it is
    downloaded.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str],
        api_url: str = "https://api.urlbox.io/v1/render/sync",
        width: int = 1920,
        height: int = 1080,
        image_format: str = "jpg",
        delay_ms: int = 15000,
        render_timeout: float = 60.0,
        allowed_domains: Sequence[str] = ALLOWED_DOMAINS,
        max_image_bytes: int = MAX_IMAGE_SIZE,
        fetch_timeout: float = 10.0,
    ) -> None:
        """
        Initialize render adapter.

        Args:
            http_client: Shared async HTTP client
            api_key: Render provider API key. If None, every camera using
                this adapter fails with MissingCredentialError.
            api_url: Render provider endpoint
            width: Viewport width in pixels
            height: Viewport height in pixels
            image_format: Output format requested from the provider
            delay_ms: Settle delay before the screenshot is taken
            render_timeout: Timeout in seconds for the render request
        """
        super().__init__(
            http_client,
            allowed_domains=allowed_domains,
            max_image_bytes=max_image_bytes,
            fetch_timeout=fetch_timeout,
        )
        self.api_key = api_key or None
        self.api_url = api_url
        self.width = width
        self.height = height
        self.image_format = image_format
        self.delay_ms = delay_ms
        self.render_timeout = render_timeout

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None

    def _build_payload(self, page_url: str) -> Dict[str, Any]:
        return {
            "url": page_url,
            "width": self.width,
            "height": self.height,
            "format": self.image_format,
            "delay": self.delay_ms,
        }

    async def _request_render(self, camera: Camera) -> str:
        """
        Ask the render provider for a screenshot of the camera's page.

        Returns:
            The renderUrl returned by the provider
        """
        logger.info(f"Requesting screenshot for camera: {camera.name}")
        try:
            response = await self.http_client.post(
                self.api_url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=self._build_payload(camera.source_url),
                timeout=self.render_timeout,
            )
        except httpx.HTTPError as e:
            raise UpstreamUnreachableError(
                f"Screenshot API request failed for {camera.name}: {type(e).__name__}"
            ) from e

        if not response.is_success:
            raise UpstreamUnreachableError(
                f"Screenshot API error for {camera.name}: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MissingRenderResultError(f"Unreadable render response for {camera.name}") from e

        render_url = data.get("renderUrl") if isinstance(data, dict) else None
        if not render_url or not isinstance(render_url, str):
            raise MissingRenderResultError(f"No renderUrl for {camera.name}")
        return render_url

    async def fetch_image(self, camera: Camera) -> CapturedImage:
        if not self.is_configured:
            raise MissingCredentialError("Render provider API key not configured")

        render_url = await self._request_render(camera)

        if not is_allowed_domain(render_url, self.allowed_domains):
            raise DisallowedDomainError(f"Render URL domain not in allowlist for {camera.name}")

        logger.info(f"Fetching rendered image for {camera.name}")
        image = await self._download_image(render_url, camera.name)
        logger.info(f"Screenshot downloaded for {camera.name}, size: {image.size} bytes")
        return image
