"""Global pytest configuration and fixtures for all tests."""

import os

import pytest
from fastapi.testclient import TestClient

from btpxpress.application import create_app
from btpxpress.config import Settings, get_settings

TEST_API_TOKEN = "test-api-token-for-secured-endpoints"


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    The settings cache is cleared so that the values are picked up by
    ``get_settings`` during the test session, and cleared again afterwards.
    """
    original_env = {}

    test_env_vars = {
        "SECRET_KEY": "test-secret-key-minimum-32-characters-long-for-testing",
        "API_TOKENS": TEST_API_TOKEN,
        "ENABLE_DOCS": "false",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value
    get_settings.cache_clear()

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value
    get_settings.cache_clear()


@pytest.fixture
def app():
    """Create a fresh application."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization headers accepted by secured endpoints."""
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest.fixture
def override_settings(app):
    """Return a helper that serves the given settings to every endpoint."""

    def _override(**values) -> Settings:
        settings = Settings(_env_file=None, **values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _override
