# Standard library imports
import asyncio
import logging
from datetime import datetime
from typing import Optional, Sequence, TYPE_CHECKING

# Local application imports
from ....core.security import ALLOWED_DOMAINS, is_allowed_domain
from ....domain.exceptions import (
    ConfigFetchError,
    DisallowedDomainError,
    PerCameraError,
    RecordInsertError,
    StorageWriteError,
)
from ....domain.models.camera import Camera
from ....domain.models.capture_result import CaptureResult, CaptureSummary
from ....domain.models.snapshot import Snapshot
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.image_storage import ImageStorage
from ....domain.repositories.snapshot_repository import SnapshotRepository
from ....utils.datetime_utils import ensure_utc, to_storage_timestamp, utc_now
from ....utils.time_slots import (
    DEFAULT_TIME_SLOT_BOUNDARIES,
    TimeSlotBoundary,
    classify_time_slot,
)

if TYPE_CHECKING:
    from ....infrastructure.external.source_adapter_registry import SourceAdapterRegistry

logger = logging.getLogger(__name__)

STORED_CONTENT_TYPE = "image/jpeg"


def build_storage_key(slug: str, captured_at: datetime) -> str:
    """
    Build the blob storage key for a snapshot.

    Args:
        slug: Camera slug (key prefix)
        captured_at: The run's capture instant

    Returns:
        Key such as "summit-cam/2025-01-15T15-30-00-123Z.jpg"
    """
    return f"{slug}/{to_storage_timestamp(captured_at)}.jpg"


class RunCaptureUseCase:
    """
    Use case for one capture pass over all active cameras.

    The capture instant and its time slot are fixed once per run and shared
    by every camera. Each camera is processed independently: any failure is
    logged with its reason, counted, and never stops the other cameras.
    Only aggregate counts are returned.
    """

    def __init__(
        self,
        camera_repository: CameraRepository,
        snapshot_repository: SnapshotRepository,
        image_storage: ImageStorage,
        adapter_registry: "SourceAdapterRegistry",
        time_slot_offset_minutes: int = -480,
        time_slot_boundaries: Sequence[TimeSlotBoundary] = DEFAULT_TIME_SLOT_BOUNDARIES,
        allowed_domains: Sequence[str] = ALLOWED_DOMAINS,
        cache_control: str = "3600",
        concurrency: int = 1,
    ) -> None:
        self.camera_repository = camera_repository
        self.snapshot_repository = snapshot_repository
        self.image_storage = image_storage
        self.adapter_registry = adapter_registry
        self.time_slot_offset_minutes = time_slot_offset_minutes
        self.time_slot_boundaries = tuple(time_slot_boundaries)
        self.allowed_domains = tuple(allowed_domains)
        self.cache_control = cache_control
        self.concurrency = max(1, concurrency)

    async def execute(self, now: Optional[datetime] = None) -> CaptureSummary:
        """
        Capture a snapshot from every active camera.

        Args:
            now: Capture instant for the run (defaults to current UTC time)

        Returns:
            CaptureSummary with processed and successful counts

        Raises:
            ConfigFetchError: If the active camera list cannot be loaded
        """
        now = ensure_utc(now) if now is not None else utc_now()
        time_slot = classify_time_slot(
            now, self.time_slot_offset_minutes, self.time_slot_boundaries
        )

        logger.info(f"Starting webcam capture process (time slot {time_slot})...")

        try:
            cameras = await self.camera_repository.find_active()
        except Exception as e:
            logger.error(f"Error fetching cameras: {e}")
            raise ConfigFetchError("Failed to fetch cameras") from e

        logger.info(f"Found {len(cameras)} active cameras")

        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded(camera: Camera) -> CaptureResult:
            async with semaphore:
                return await self._capture_camera(camera, now, time_slot)

        results = await asyncio.gather(*(bounded(camera) for camera in cameras))
        summary = CaptureSummary.from_results(results)

        logger.info(
            f"Webcam capture complete: {summary.successful}/{summary.processed} successful"
        )
        return summary

    async def _capture_camera(self, camera: Camera, now: datetime, time_slot: str) -> CaptureResult:
        """Run the full pipeline for one camera and report its outcome."""
        try:
            logger.info(f"Processing camera: {camera.name} ({camera.source_type})")

            if not is_allowed_domain(camera.source_url, self.allowed_domains):
                raise DisallowedDomainError(
                    f"Source URL domain not in allowlist for camera {camera.name}"
                )

            adapter = self.adapter_registry.for_camera(camera)
            image = await adapter.fetch_image(camera)

            key = build_storage_key(camera.slug, now)
            try:
                await self.image_storage.upload(
                    key,
                    image.data,
                    content_type=STORED_CONTENT_TYPE,
                    cache_control=self.cache_control,
                )
            except PerCameraError:
                raise
            except Exception as e:
                raise StorageWriteError(f"Upload error for {camera.name}: {e}") from e

            public_url = self.image_storage.get_public_url(key)
            logger.info(f"Image uploaded successfully for {camera.name}")

            snapshot = Snapshot(
                id=None,
                camera_id=camera.id or "",
                image_url=public_url,
                captured_at=now,
                time_slot=time_slot,
                file_size_bytes=image.size,
            )
            try:
                await self.snapshot_repository.create(snapshot)
            except Exception as e:
                raise RecordInsertError(f"Snapshot record error for {camera.name}: {e}") from e

            return CaptureResult(camera_name=camera.name, success=True)

        except PerCameraError as e:
            logger.error(f"Capture failed for camera {camera.name} [{e.reason}]: {e.message}")
            return CaptureResult(camera_name=camera.name, success=False, reason=e.reason)
        except Exception as e:
            logger.error(f"Error processing camera {camera.name}: {e}", exc_info=True)
            return CaptureResult(camera_name=camera.name, success=False, reason="unexpected_error")
