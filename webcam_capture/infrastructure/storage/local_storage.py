"""Local Image Storage

Development backend that writes snapshot images under a local directory,
organized by camera slug, and serves them through the /media static mount.
"""

import asyncio
import logging
from pathlib import Path
from urllib.parse import quote

from ...domain.exceptions import StorageWriteError
from ...domain.repositories.image_storage import ImageStorage

logger = logging.getLogger(__name__)

MEDIA_MOUNT_PATH = "/media"


class LocalImageStorage(ImageStorage):
    """Filesystem implementation of ImageStorage"""

    def __init__(self, base_dir: str, public_base_url: str) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.public_base_url = public_base_url.rstrip("/")

    def _resolve(self, key: str) -> Path:
        path = (self.base_dir / key.lstrip("/")).resolve()
        if self.base_dir not in path.parents:
            raise StorageWriteError(f"Storage key escapes storage directory: {key}")
        return path

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # "xb" refuses to overwrite an existing object
        with open(path, "xb") as f:
            f.write(data)

    async def upload(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_control: str,
    ) -> None:
        path = self._resolve(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except FileExistsError as e:
            raise StorageWriteError(f"Object already exists: {key}") from e
        except OSError as e:
            raise StorageWriteError(f"Failed to write {key}: {e}") from e
        logger.debug(f"Stored {len(data)} bytes at {path}")

    def get_public_url(self, key: str) -> str:
        return f"{self.public_base_url}{MEDIA_MOUNT_PATH}/{quote(key.lstrip('/'), safe='/')}"
