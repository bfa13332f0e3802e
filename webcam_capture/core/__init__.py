from .config import Settings, get_settings
from .security import (
    ALLOWED_DOMAINS,
    MAX_IMAGE_SIZE,
    CaptureAuthenticator,
    extract_bearer_token,
    is_allowed_domain,
    is_valid_image_content_type,
    is_within_size_limit,
)

__all__ = [
    "Settings",
    "get_settings",
    "ALLOWED_DOMAINS",
    "MAX_IMAGE_SIZE",
    "CaptureAuthenticator",
    "extract_bearer_token",
    "is_allowed_domain",
    "is_valid_image_content_type",
    "is_within_size_limit",
]
