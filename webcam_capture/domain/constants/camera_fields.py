"""Constants for Camera model field names"""


class CameraFields:
    """Field name constants for Camera model"""
    ID = "id"
    NAME = "name"
    SLUG = "slug"
    SOURCE_TYPE = "source_type"
    SOURCE_URL = "source_url"
    IS_ACTIVE = "is_active"
    DISPLAY_ORDER = "display_order"
    DESCRIPTION = "description"
    ELEVATION_FT = "elevation_ft"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
