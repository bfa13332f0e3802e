# Standard library imports
import logging

# Local application imports
from .base_source_adapter import CapturedImage, SourceAdapter
from ...domain.models.camera import Camera

logger = logging.getLogger(__name__)


class DirectFetchAdapter(SourceAdapter):
    """
    Adapter for sources that expose the current frame at a plain image URL
    (``roundshot`` cameras). The response body is the snapshot.
    """

    async def fetch_image(self, camera: Camera) -> CapturedImage:
        logger.info(f"Fetching image from allowed source for camera: {camera.name}")
        image = await self._download_image(camera.source_url, camera.name)
        logger.info(f"Image downloaded for {camera.name}, size: {image.size} bytes")
        return image
