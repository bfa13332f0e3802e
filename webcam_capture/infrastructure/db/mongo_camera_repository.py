# Standard library imports
import logging
from typing import Optional, List, Dict, Any, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera
from ...domain.constants import CameraFields
from .mongo_connection import get_camera_collection

logger = logging.getLogger(__name__)


class MongoCameraRepository(CameraRepository):
    """MongoDB implementation of CameraRepository (read-only)"""

    def __init__(self, camera_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.camera_collection = camera_collection if camera_collection is not None else get_camera_collection()

    async def find_active(self) -> List[Camera]:
        """
        Find all active cameras ordered by display_order

        Returns:
            List of Camera domain models. Documents that fail domain
            validation are skipped with a warning.
        """
        try:
            cursor = self.camera_collection.find({CameraFields.IS_ACTIVE: True}).sort(
                CameraFields.DISPLAY_ORDER, 1
            )
            cameras = []
            async for document in cursor:
                camera = self._try_document_to_camera(document)
                if camera is not None:
                    cameras.append(camera)
            return cameras
        except Exception as e:
            raise RuntimeError(f"Error listing active cameras: {str(e)}")

    async def find_by_ids(self, camera_ids: Sequence[str]) -> List[Camera]:
        """
        Find cameras by ID

        Matches both the custom "id" field and MongoDB ObjectIds.

        Args:
            camera_ids: Camera IDs to look up

        Returns:
            List of Camera domain models (missing IDs are skipped)
        """
        ids = [camera_id for camera_id in dict.fromkeys(camera_ids) if camera_id]
        if not ids:
            return []

        object_ids = []
        for camera_id in ids:
            try:
                object_ids.append(ObjectId(camera_id))
            except (InvalidId, ValueError, TypeError):
                continue

        query: Dict[str, Any] = {CameraFields.ID: {"$in": ids}}
        if object_ids:
            query = {
                "$or": [
                    {CameraFields.ID: {"$in": ids}},
                    {CameraFields.MONGO_ID: {"$in": object_ids}},
                ]
            }

        try:
            cursor = self.camera_collection.find(query)
            cameras = []
            async for document in cursor:
                camera = self._try_document_to_camera(document)
                if camera is not None:
                    cameras.append(camera)
            return cameras
        except Exception as e:
            raise RuntimeError(f"Error finding cameras by ID: {str(e)}")

    def _try_document_to_camera(self, document: Dict[str, Any]) -> Optional[Camera]:
        try:
            return self._document_to_camera(document)
        except (ValueError, TypeError) as e:
            logger.warning(
                f"Skipping malformed camera document {document.get(CameraFields.MONGO_ID)}: {e}"
            )
            return None

    def _document_to_camera(self, document: Dict[str, Any]) -> Camera:
        """
        Convert MongoDB document to Camera domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Camera domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        # Prefer the custom "id" field; fall back to MongoDB "_id"
        camera_id = None
        if document.get(CameraFields.ID):
            camera_id = str(document[CameraFields.ID])
        elif CameraFields.MONGO_ID in document:
            camera_id = str(document[CameraFields.MONGO_ID])

        return Camera(
            id=camera_id,
            name=document.get(CameraFields.NAME, ""),
            slug=document.get(CameraFields.SLUG, ""),
            source_type=document.get(CameraFields.SOURCE_TYPE, ""),
            source_url=document.get(CameraFields.SOURCE_URL, ""),
            is_active=bool(document.get(CameraFields.IS_ACTIVE, False)),
            display_order=document.get(CameraFields.DISPLAY_ORDER) or 0,
            description=document.get(CameraFields.DESCRIPTION),
            elevation_ft=document.get(CameraFields.ELEVATION_FT),
        )
