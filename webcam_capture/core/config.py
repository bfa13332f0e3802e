# Standard library imports
import os
from typing import Final, List, Optional, Tuple

# Local application imports
from ..utils.time_slots import (
    DEFAULT_TIME_SLOT_BOUNDARIES,
    TimeSlotBoundary,
    parse_time_slot_boundaries,
)


def _optional_env(name: str) -> Optional[str]:
    """Return the environment value, treating empty strings as unset."""
    value = os.getenv(name, "").strip()
    return value or None


def _csv_env(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    Secrets (webhook secret, storage key, render key) default to None so that
    their absence can be detected and reported.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "webcam_history")

        # Capture endpoint authentication
        self.capture_webhook_secret: Final[Optional[str]] = _optional_env("CAPTURE_WEBHOOK_SECRET")

        # Blob storage Configuration
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "supabase").strip().lower()
        self.storage_url: Final[str] = os.getenv("STORAGE_URL", "").rstrip("/")
        self.storage_service_key: Final[Optional[str]] = _optional_env("STORAGE_SERVICE_KEY")
        self.storage_bucket: Final[str] = os.getenv("STORAGE_BUCKET", "webcam-snapshots")
        self.storage_cache_control: Final[str] = os.getenv("STORAGE_CACHE_CONTROL", "3600")
        self.local_storage_dir: Final[str] = os.getenv("LOCAL_STORAGE_DIR", "snapshots")
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")

        # Render provider Configuration (screenshot service for embed pages)
        self.render_api_key: Final[Optional[str]] = _optional_env("RENDER_API_KEY")
        self.render_api_url: Final[str] = os.getenv(
            "RENDER_API_URL",
            "https://api.urlbox.io/v1/render/sync"
        )
        self.render_width: Final[int] = int(os.getenv("RENDER_WIDTH", "1920"))
        self.render_height: Final[int] = int(os.getenv("RENDER_HEIGHT", "1080"))
        self.render_format: Final[str] = os.getenv("RENDER_FORMAT", "jpg")
        self.render_delay_ms: Final[int] = int(os.getenv("RENDER_DELAY_MS", "15000"))

        # Fetch limits
        self.direct_fetch_timeout_seconds: Final[float] = float(
            os.getenv("DIRECT_FETCH_TIMEOUT_SECONDS", "10")
        )
        self.render_timeout_seconds: Final[float] = float(
            os.getenv("RENDER_TIMEOUT_SECONDS", "60")
        )
        self.max_image_bytes: Final[int] = int(
            os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024))
        )
        self.capture_concurrency: Final[int] = max(1, int(os.getenv("CAPTURE_CONCURRENCY", "1")))

        # Time slot Configuration
        self.time_slot_utc_offset_minutes: Final[int] = int(
            os.getenv("TIME_SLOT_UTC_OFFSET_MINUTES", "-480")
        )
        if abs(self.time_slot_utc_offset_minutes) >= 24 * 60:
            raise ValueError(
                f"TIME_SLOT_UTC_OFFSET_MINUTES out of range: {self.time_slot_utc_offset_minutes}"
            )
        raw_boundaries = _optional_env("TIME_SLOT_BOUNDARIES")
        self.time_slot_boundaries: Final[Tuple[TimeSlotBoundary, ...]] = (
            parse_time_slot_boundaries(raw_boundaries)
            if raw_boundaries
            else DEFAULT_TIME_SLOT_BOUNDARIES
        )

        # HTTP / logging
        self.cors_allow_origins: Final[List[str]] = _csv_env("CORS_ALLOW_ORIGINS", "*")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
