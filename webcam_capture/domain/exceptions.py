"""
Exception hierarchy for the webcam capture pipeline.

Run-level errors (AuthorizationError, ConfigFetchError) stop a capture run and
are mapped to HTTP responses by the capture controller. PerCameraError and its
subtypes are scoped to a single camera: the orchestrator logs them with their
``reason`` tag, counts the camera as failed and moves on.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CaptureError(Exception):
    """Base exception for all capture pipeline errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Run level
# -----------------------------------------------------------------------------


class AuthorizationError(CaptureError):
    """Raised when the caller's bearer secret is missing or wrong."""
    pass


class ConfigFetchError(CaptureError):
    """Raised when the active camera list cannot be loaded."""
    pass


# -----------------------------------------------------------------------------
# Per camera
# -----------------------------------------------------------------------------


class PerCameraError(CaptureError):
    """Base exception for failures that only affect one camera."""

    reason = "capture_failed"


class DisallowedDomainError(PerCameraError):
    """Raised when a URL about to be fetched is not on the allowlist."""

    reason = "disallowed_domain"


class UpstreamUnreachableError(PerCameraError):
    """Raised on network failures and non-2xx upstream responses."""

    reason = "upstream_unreachable"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidContentTypeError(PerCameraError):
    """Raised when a downloaded payload is not declared as an image."""

    reason = "invalid_content_type"


class PayloadTooLargeError(PerCameraError):
    """Raised when a downloaded payload exceeds the size ceiling."""

    reason = "payload_too_large"


class MissingRenderResultError(PerCameraError):
    """Raised when the render provider response has no usable render URL."""

    reason = "missing_render_result"


class MissingCredentialError(PerCameraError):
    """Raised when an adapter needs a provider credential that is not configured."""

    reason = "missing_credential"


class UnsupportedSourceTypeError(PerCameraError):
    """Raised when no adapter is registered for a camera's source type."""

    reason = "unsupported_source_type"


class StorageWriteError(PerCameraError):
    """Raised when the image cannot be written to blob storage."""

    reason = "storage_write_failed"


class RecordInsertError(PerCameraError):
    """Raised when the snapshot record cannot be inserted."""

    reason = "record_insert_failed"
