"""
Capture API: the single trigger endpoint called by the capture scheduler.

POST /   runs one capture pass and returns aggregate counts
OPTIONS / answers CORS pre-flight requests
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
from typing import Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Header, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.capture_dto import CaptureErrorResponse, CaptureRunResponse
from ...application.use_cases.capture.run_capture import RunCaptureUseCase
from ...core.security import CaptureAuthenticator
from ...di.container import get_container
from ...domain.exceptions import AuthorizationError, ConfigFetchError

# -----------------------------------------------------------------------------
# Logging and router
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)
router = APIRouter(tags=["capture"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

GENERIC_ERROR_MESSAGE = "An error occurred during webcam capture"


def _json_response(body: BaseModel, status_code: int) -> JSONResponse:
    return JSONResponse(content=body.model_dump(), status_code=status_code, headers=CORS_HEADERS)


@router.options("/", include_in_schema=False)
async def capture_preflight() -> Response:
    """Answer CORS pre-flight requests for the capture endpoint."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post(
    "/",
    response_model=CaptureRunResponse,
    responses={
        401: {"model": CaptureErrorResponse},
        500: {"model": CaptureErrorResponse},
    },
)
async def capture_webcams(
    authorization: Optional[str] = Header(default=None),
) -> JSONResponse:
    """
    Capture one snapshot from every active camera.

    Args:
        authorization: "Bearer <CAPTURE_WEBHOOK_SECRET>"

    Returns:
        200 with {success, processed, successful}; 401 if the caller secret is
        wrong; 500 with a generic message otherwise. Per-camera failures are
        only logged, never echoed back.
    """
    try:
        container = get_container()
        authenticator: CaptureAuthenticator = container.get(CaptureAuthenticator)

        try:
            authenticator.authenticate(authorization)
        except AuthorizationError as e:
            logger.error(f"Unauthorized: {e.message}")
            return _json_response(
                CaptureErrorResponse(error="Unauthorized"),
                status.HTTP_401_UNAUTHORIZED,
            )

        use_case: RunCaptureUseCase = container.get(RunCaptureUseCase)
        summary = await use_case.execute()

        return _json_response(
            CaptureRunResponse(processed=summary.processed, successful=summary.successful),
            status.HTTP_200_OK,
        )
    except ConfigFetchError as e:
        logger.error(f"Webcam capture aborted: {e.message}", exc_info=True)
        return _json_response(
            CaptureErrorResponse(error="Failed to fetch cameras"),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except Exception as e:
        logger.error(f"Webcam capture error: {e}", exc_info=True)
        return _json_response(
            CaptureErrorResponse(error=GENERIC_ERROR_MESSAGE),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
