class SnapshotFields:
    """MongoDB field names for snapshots collection"""

    MONGO_ID = "_id"

    CAMERA_ID = "camera_id"
    IMAGE_URL = "image_url"

    CAPTURED_AT = "captured_at"
    TIME_SLOT = "time_slot"
    FILE_SIZE_BYTES = "file_size_bytes"

    CREATED_AT = "created_at"
