# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.capture_dto import HealthResponse
from ...core.config import Settings
from ...core.security import CaptureAuthenticator
from ...di.container import get_container


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Report operability of the capture service.

    capture_auth is "disabled" when no webhook secret is configured, which
    means anyone can trigger a capture run.
    """
    container = get_container()
    settings: Settings = container.get(Settings)
    authenticator: CaptureAuthenticator = container.get(CaptureAuthenticator)

    return HealthResponse(
        capture_auth="enabled" if authenticator.is_enforced else "disabled",
        render_provider="configured" if settings.render_api_key else "missing",
        storage_backend="local" if settings.storage_backend == "local" else "supabase",
    )
