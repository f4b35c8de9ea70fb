from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from calc_api.core.config import Settings
from calc_api.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Client against a production-mode app (internal error details hidden)."""
    app = create_app(settings_override=Settings(environment="production"))
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def dev_client() -> TestClient:
    """Client against a development-mode app."""
    app = create_app(settings_override=Settings(environment="development"))
    return TestClient(app, raise_server_exceptions=False)
