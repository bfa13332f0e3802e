# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.snapshot_repository import SnapshotRepository
from ...domain.models.snapshot import Snapshot
from ...domain.constants import SnapshotFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_snapshot_collection


class MongoSnapshotRepository(SnapshotRepository):
    """MongoDB implementation of SnapshotRepository"""

    def __init__(self, snapshot_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.snapshot_collection = (
            snapshot_collection if snapshot_collection is not None else get_snapshot_collection()
        )

    async def create(self, snapshot: Snapshot) -> str:
        if not snapshot:
            raise ValueError("Snapshot cannot be None")

        doc = {
            SnapshotFields.CAMERA_ID: snapshot.camera_id,
            SnapshotFields.IMAGE_URL: snapshot.image_url,
            SnapshotFields.CAPTURED_AT: ensure_utc(snapshot.captured_at),
            SnapshotFields.TIME_SLOT: snapshot.time_slot,
            SnapshotFields.FILE_SIZE_BYTES: snapshot.file_size_bytes,
            SnapshotFields.CREATED_AT: snapshot.created_at or utc_now(),
        }

        try:
            result = await self.snapshot_collection.insert_one(doc)
        except Exception as e:
            raise RuntimeError(f"Error inserting snapshot: {str(e)}")
        return str(result.inserted_id)

    async def list_by_window(
        self,
        start_utc: datetime,
        end_utc: datetime,
        time_slot: Optional[str] = None,
    ) -> List[Snapshot]:
        query = {
            SnapshotFields.CAPTURED_AT: {"$gte": ensure_utc(start_utc), "$lt": ensure_utc(end_utc)},
        }
        if time_slot:
            query[SnapshotFields.TIME_SLOT] = time_slot

        try:
            cursor = self.snapshot_collection.find(query).sort(SnapshotFields.CAPTURED_AT, -1)
            items = []
            async for doc in cursor:
                items.append(self._document_to_snapshot(doc))
            return items
        except Exception as e:
            raise RuntimeError(f"Error listing snapshots: {str(e)}")

    def _document_to_snapshot(self, doc: dict) -> Snapshot:
        return Snapshot(
            id=str(doc.get(SnapshotFields.MONGO_ID)),
            camera_id=str(doc.get(SnapshotFields.CAMERA_ID) or ""),
            image_url=doc.get(SnapshotFields.IMAGE_URL) or "",
            captured_at=ensure_utc(doc.get(SnapshotFields.CAPTURED_AT)),
            time_slot=doc.get(SnapshotFields.TIME_SLOT) or "",
            file_size_bytes=int(doc.get(SnapshotFields.FILE_SIZE_BYTES) or 0),
            created_at=ensure_utc(doc.get(SnapshotFields.CREATED_AT)),
        )
