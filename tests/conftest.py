"""
Shared pytest fixtures for webcam capture tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from webcam_capture.utils.time_slots import DEFAULT_TIME_SLOT_BOUNDARIES


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_webcam_db",
        "CAPTURE_WEBHOOK_SECRET": "test_webhook_secret",
        "RENDER_API_KEY": "test_render_key",
        "STORAGE_URL": "https://project.supabase.co",
        "STORAGE_SERVICE_KEY": "test_service_key",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture with a settings double carrying the default capture configuration."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.capture_webhook_secret = "test_webhook_secret"
    mock.render_api_key = "test_render_key"
    mock.storage_backend = "supabase"
    mock.time_slot_utc_offset_minutes = -480
    mock.time_slot_boundaries = DEFAULT_TIME_SLOT_BOUNDARIES
    return mock


@pytest.fixture
def fixed_now():
    """15:30 UTC on 2025-01-15, i.e. 07:30 in PST."""
    return datetime(2025, 1, 15, 15, 30, 0, 123000, tzinfo=timezone.utc)

