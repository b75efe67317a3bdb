"""Tests for the application factory: CORS, error handling and wiring."""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_container
from api.errors import status_for
from modules.auth.service import AuthService
from modules.diagnostics.service import AuthDiagnosticsService
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    MentorError,
    NotFoundError,
    ValidationError,
)
from tests.conftest import make_settings


def add_failing_route(app):
    router = APIRouter()

    @router.get("/api/boom")
    async def boom():
        raise RuntimeError("kaboom")

    app.include_router(router)


class TestStatusMapping:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (ValidationError("bad"), 400),
            (AuthenticationError("who"), 401),
            (AuthorizationError("no"), 403),
            (NotFoundError("gone"), 404),
            (ExternalServiceError("down", service="supabase"), 500),
            (MentorError("other"), 500),
        ],
    )
    def test_status_for(self, error, status_code):
        assert status_for(error) == status_code


class TestUnhandledErrors:
    def test_detail_outside_production(self):
        app = create_app(make_settings(environment="development"))
        add_failing_route(app)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "detail": "kaboom"}

    def test_no_detail_in_production(self):
        app = create_app(make_settings(environment="production"))
        add_failing_route(app)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestRoutingErrors:
    def test_unknown_path_uses_envelope(self):
        client = TestClient(create_app(make_settings()))

        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json; charset=utf-8"
        assert response.json() == {"error": "Not Found", "code": "NOT_FOUND"}


class TestCors:
    def test_preflight_reflects_origin(self):
        """Preflights get CORS headers and no content."""
        client = TestClient(create_app(make_settings()))

        response = client.options(
            "/api/reactions",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            },
        )

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "https://app.example.com"
        assert response.headers["access-control-allow-credentials"] == "true"
        allowed_headers = response.headers["access-control-allow-headers"].lower()
        assert "authorization" in allowed_headers
        assert "cookie" in allowed_headers
        assert "DELETE" in response.headers["access-control-allow-methods"]

    def test_plain_options_no_content(self):
        """OPTIONS without preflight headers never reaches the routers."""
        client = TestClient(create_app(make_settings()))

        response = client.options("/api/reactions", headers={"Origin": "https://app.example.com"})

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "https://app.example.com"

    def test_options_on_unknown_path(self):
        client = TestClient(create_app(make_settings()))
        assert client.options("/api/debug-auth-nope").status_code == 204

    def test_simple_request_reflects_origin(self):
        client = TestClient(create_app(make_settings()))

        response = client.get("/api/health", headers={"Origin": "https://app.example.com"})

        assert response.headers["access-control-allow-origin"] == "https://app.example.com"
        assert response.headers["access-control-allow-credentials"] == "true"


class TestContainerWiring:
    def test_services_share_settings_and_verifiers(self):
        settings = make_settings()
        create_app(settings)
        container = get_container()

        assert container.settings is settings
        assert isinstance(container.auth, AuthService)
        assert isinstance(container.diagnostics, AuthDiagnosticsService)
        assert [v.name for v in container.verifiers] == ["admin_client", "anon_client"]
        assert container.auth is container.auth
