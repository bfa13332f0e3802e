# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import capture_router, health_router, snapshot_router
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.storage.local_storage import MEDIA_MOUNT_PATH

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Warns about degraded configuration on startup and releases the pooled
    HTTP client and MongoDB connection on shutdown.
    """
    settings = get_settings()

    if not settings.capture_webhook_secret:
        logger.warning(
            "CAPTURE_WEBHOOK_SECRET not configured - capture endpoint accepts unauthenticated requests"
        )
    if not settings.render_api_key:
        logger.warning(
            "RENDER_API_KEY not configured - cameras that need page rendering will fail"
        )
    logger.info(f"Webcam capture service started (storage backend: {settings.storage_backend})")

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and log level
    - CORS middleware configuration
    - API route registration (and the /media mount for local storage)

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="Webcam Capture API",
        version="1.0.0",
        description="Scheduled webcam snapshot capture and history backend",
        lifespan=lifespan
    )

    # Capture responses also carry explicit CORS headers for non-browser callers
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    # Register API routers
    application.include_router(capture_router)
    application.include_router(health_router)
    application.include_router(snapshot_router, prefix="/api/v1/snapshots")

    if settings.storage_backend == "local":
        application.mount(
            MEDIA_MOUNT_PATH,
            StaticFiles(directory=settings.local_storage_dir, check_dir=False),
            name="media",
        )

    return application


# Create application instance
app = create_application()
