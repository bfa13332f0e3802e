"""Blob storage backends for snapshot images"""

from .supabase_storage import SupabaseImageStorage
from .local_storage import LocalImageStorage, MEDIA_MOUNT_PATH

__all__ = [
    "SupabaseImageStorage",
    "LocalImageStorage",
    "MEDIA_MOUNT_PATH",
]
