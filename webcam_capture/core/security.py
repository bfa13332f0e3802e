# Standard library imports
import logging
import secrets
from typing import Optional, Sequence
from urllib.parse import urlsplit

# Local application imports
from ..domain.exceptions import AuthorizationError

logger = logging.getLogger(__name__)

# Maximum accepted image payload (10 MiB)
MAX_IMAGE_SIZE = 10 * 1024 * 1024

# Hosts the capture job may fetch from: the direct image provider and the
# screenshot provider's API/CDN hosts. Subdomains are allowed.
ALLOWED_DOMAINS = (
    "backend.roundshot.com",
    "api.urlbox.io",
    "urlbox.io",
    "s3.urlbox.io",
)

_ALLOWED_SCHEMES = ("http", "https")
_BEARER_PREFIX = "Bearer "


def is_allowed_domain(url: Optional[str], allowed_domains: Sequence[str] = ALLOWED_DOMAINS) -> bool:
    """
    Check that a URL points at an allowlisted host.

    Args:
        url: URL about to be fetched
        allowed_domains: Trusted hostnames

    Returns:
        True if the hostname equals an allowlisted domain or is a subdomain
        of one. Malformed URLs and non-http(s) schemes return False.
    """
    if not url or not isinstance(url, str):
        return False
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return False

    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not hostname:
        return False

    hostname = hostname.rstrip(".").lower()
    for domain in allowed_domains:
        domain = domain.lower()
        if hostname == domain or hostname.endswith("." + domain):
            return True
    return False


def is_valid_image_content_type(content_type: Optional[str]) -> bool:
    """
    Check that a response declares an image payload.

    Args:
        content_type: Value of the Content-Type header (may be None)

    Returns:
        True if present and starting with "image/"
    """
    if not content_type:
        return False
    return content_type.strip().lower().startswith("image/")


def is_within_size_limit(size: int, max_bytes: int = MAX_IMAGE_SIZE) -> bool:
    """Return True if a payload of ``size`` bytes may be stored."""
    return 0 <= size <= max_bytes


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header value.

    Returns:
        The text after "Bearer ", the raw header when there is no prefix,
        or None when the header is missing or empty
    """
    if not authorization:
        return None
    if authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX):]
    return authorization


class CaptureAuthenticator:
    """
    Admits or rejects capture invocations using a shared webhook secret.

    With no secret configured every request is admitted, which leaves the
    capture endpoint open; this is reported on every call and by /health.
    """

    def __init__(self, webhook_secret: Optional[str]) -> None:
        self._webhook_secret = webhook_secret or None

    @property
    def is_enforced(self) -> bool:
        return self._webhook_secret is not None

    def authenticate(self, authorization: Optional[str]) -> None:
        """
        Validate the Authorization header of a capture request.

        Args:
            authorization: Raw Authorization header value

        Raises:
            AuthorizationError: If a secret is configured and the bearer token
                is missing or does not match it exactly
        """
        if not self.is_enforced:
            logger.warning("CAPTURE_WEBHOOK_SECRET not configured - capture endpoint is unprotected")
            return

        token = extract_bearer_token(authorization)
        if token is None or not secrets.compare_digest(
            token.encode("utf-8"), self._webhook_secret.encode("utf-8")
        ):
            raise AuthorizationError("Invalid or missing webhook secret")
