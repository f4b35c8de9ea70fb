"""Tests for error handlers and settings."""

from __future__ import annotations

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from calc_api.core.config import Settings
from calc_api.core.errors import MissingParametersError
from calc_api.main import create_app


def _app_with_failing_route(environment: str) -> TestClient:
    app = create_app(settings_override=Settings(environment=environment))
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("Test error")

    app.include_router(router)
    return TestClient(app, raise_server_exceptions=False)


class TestServerErrorHandler:
    def test_development_exposes_message(self) -> None:
        response = _app_with_failing_route("development").get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Erreur interne du serveur", "message": "Test error"}

    def test_production_hides_message(self) -> None:
        response = _app_with_failing_route("production").get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Erreur interne du serveur"}
        assert "message" not in response.json()

    def test_internal_error_keeps_cors_header(self) -> None:
        response = _app_with_failing_route("production").get(
            "/boom", headers={"Origin": "https://example.org"}
        )

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "*"


class TestMissingParametersError:
    def test_lists_missing_names(self) -> None:
        exc = MissingParametersError(["ht", "taux"], {"ht": "100", "taux": ""})
        assert exc.missing == ["taux"]
        assert exc.received == {"ht": "100", "taux": ""}


class TestSettings:
    def test_environment_is_normalized(self) -> None:
        settings = Settings(environment=" Development ")
        settings.init_post_load()
        assert settings.environment == "development"
        assert settings.is_development

    def test_unknown_environment_rejected(self) -> None:
        settings = Settings(environment="staging")
        with pytest.raises(ValueError, match="Unsupported environment"):
            settings.init_post_load()

    def test_reads_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "Pricing")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        settings = Settings()
        assert settings.app_name == "Pricing"
        assert settings.port == 8080
        assert settings.environment == "production"
