from datetime import date
from typing import Optional

from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.snapshot_repository import SnapshotRepository
from ....application.dto.snapshot_dto import (
    SnapshotCameraResponse,
    SnapshotListResponse,
    SnapshotResponse,
)
from ....utils.datetime_utils import local_day_bounds_utc


class ListSnapshotsUseCase:
    """Use case for browsing snapshots of one local day, optionally one time slot"""

    def __init__(
        self,
        snapshot_repository: SnapshotRepository,
        camera_repository: CameraRepository,
        time_slot_offset_minutes: int = -480,
    ) -> None:
        self._snapshot_repository = snapshot_repository
        self._camera_repository = camera_repository
        self._time_slot_offset_minutes = time_slot_offset_minutes

    async def execute(self, day: date, time_slot: Optional[str] = None) -> SnapshotListResponse:
        """
        List snapshots captured on a local calendar day, newest first.

        Args:
            day: Local date (interpreted with the time slot offset)
            time_slot: Optional time slot label filter

        Returns:
            SnapshotListResponse with camera display fields joined in
        """
        start_utc, end_utc = local_day_bounds_utc(day, self._time_slot_offset_minutes)
        snapshots = await self._snapshot_repository.list_by_window(
            start_utc=start_utc,
            end_utc=end_utc,
            time_slot=time_slot,
        )

        cameras = await self._camera_repository.find_by_ids([s.camera_id for s in snapshots])
        cameras_by_id = {camera.id: camera for camera in cameras}

        items = []
        for snapshot in snapshots:
            camera = cameras_by_id.get(snapshot.camera_id)
            items.append(
                SnapshotResponse(
                    id=snapshot.id or "",
                    image_url=snapshot.image_url,
                    captured_at=snapshot.captured_at,
                    time_slot=snapshot.time_slot,
                    file_size_bytes=snapshot.file_size_bytes,
                    camera=SnapshotCameraResponse(
                        id=camera.id or "",
                        name=camera.name,
                        slug=camera.slug,
                        description=camera.description,
                        elevation_ft=camera.elevation_ft,
                    ) if camera else None,
                )
            )

        return SnapshotListResponse(total=len(items), items=items)
