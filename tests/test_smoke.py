"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_settings(mock_env):
    """Verify webcam_capture package can be imported and configured."""
    from webcam_capture.core.config import Settings

    settings = Settings()
    assert settings is not None
    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.capture_webhook_secret == "test_webhook_secret"


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
