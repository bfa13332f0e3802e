"""
Unit tests for the DI container wiring (no real MongoDB or HTTP connections).
"""
import os
from unittest.mock import MagicMock, patch

import pytest
from webcam_capture.application.use_cases.capture.run_capture import RunCaptureUseCase
from webcam_capture.application.use_cases.snapshot.list_snapshots import ListSnapshotsUseCase
from webcam_capture.core.config import Settings
from webcam_capture.core.security import CaptureAuthenticator
from webcam_capture.di.base_container import BaseContainer
from webcam_capture.di.container import DIContainer
from webcam_capture.domain.repositories.image_storage import ImageStorage
from webcam_capture.infrastructure.external.direct_fetch_adapter import DirectFetchAdapter
from webcam_capture.infrastructure.external.render_fetch_adapter import RenderFetchAdapter
from webcam_capture.infrastructure.external.source_adapter_registry import SourceAdapterRegistry
from webcam_capture.infrastructure.storage.local_storage import LocalImageStorage
from webcam_capture.infrastructure.storage.supabase_storage import SupabaseImageStorage


def _build_container(settings: Settings) -> DIContainer:
    with patch("webcam_capture.di.providers.database_provider.get_database", return_value=MagicMock()), \
            patch("webcam_capture.di.providers.database_provider.get_camera_collection", return_value=MagicMock()), \
            patch("webcam_capture.di.providers.database_provider.get_snapshot_collection", return_value=MagicMock()), \
            patch("webcam_capture.di.providers.storage_provider.get_settings", return_value=settings), \
            patch("webcam_capture.di.providers.storage_provider.get_shared_http_client", return_value=MagicMock()):
        return DIContainer()


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_and_factory(self):
        container = BaseContainer()
        container.register_singleton("config", {"a": 1})
        container.register_factory(list, lambda: [])
        assert container.get("config") is container.get("config")
        assert container.get(list) is not container.get(list)
        assert container.is_registered(list) is True

    def test_missing_dependency(self):
        with pytest.raises(ValueError, match="No dependency registered for dict"):
            BaseContainer().get(dict)


class TestDIContainer:
    """Tests for DIContainer provider composition"""

    def test_resolves_use_cases(self, mock_env):
        container = _build_container(Settings())

        assert isinstance(container.get(RunCaptureUseCase), RunCaptureUseCase)
        assert isinstance(container.get(ListSnapshotsUseCase), ListSnapshotsUseCase)
        assert isinstance(container.get(ImageStorage), SupabaseImageStorage)
        assert container.get(CaptureAuthenticator).is_enforced is True

    def test_registry_maps_source_types(self, mock_env):
        registry = _build_container(Settings()).get(SourceAdapterRegistry)

        assert isinstance(registry.get("roundshot"), DirectFetchAdapter)
        render_adapter = registry.get("verkada")
        assert isinstance(render_adapter, RenderFetchAdapter)
        assert render_adapter.api_key == "test_render_key"

    def test_local_storage_backend(self, mock_env, tmp_path):
        with patch.dict(os.environ, {"STORAGE_BACKEND": "local", "LOCAL_STORAGE_DIR": str(tmp_path)}):
            settings = Settings()
        container = _build_container(settings)
        assert isinstance(container.get(ImageStorage), LocalImageStorage)

    def test_missing_secret_disables_auth(self, mock_env):
        with patch.dict(os.environ, {"CAPTURE_WEBHOOK_SECRET": ""}):
            settings = Settings()
        assert _build_container(settings).get(CaptureAuthenticator).is_enforced is False
