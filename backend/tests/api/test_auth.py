"""
Tests for the authentication dependencies.

Uses a throwaway route so the dependency is exercised through FastAPI.
"""

import pytest
from typing import Optional
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from api.dependencies import get_auth_service
from api.errors import register_exception_handlers
from api.middleware.auth import get_current_user, get_optional_user
from modules.auth.service import AuthService
from shared.models import AuthenticatedUser
from tests.conftest import StubVerifier, create_test_token


@pytest.fixture
def app(settings, test_user) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app, settings)

    @app.get("/protected")
    async def protected(user: AuthenticatedUser = Depends(get_current_user)):
        return {"user_id": user.id}

    @app.get("/public")
    async def public(user: Optional[AuthenticatedUser] = Depends(get_optional_user)):
        return {"user_id": user.id if user else None}

    return app


def use_verifiers(app, settings, verifiers):
    service = AuthService(settings, verifiers)
    app.dependency_overrides[get_auth_service] = lambda: service


class TestGetCurrentUser:
    def test_header_token(self, app, settings, test_user, auth_headers):
        use_verifiers(app, settings, [StubVerifier("admin_client", user=test_user)])
        client = TestClient(app)

        response = client.get("/protected", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"user_id": test_user.id}

    def test_cookie_token(self, app, settings, test_user):
        verifier = StubVerifier("admin_client", user=test_user)
        use_verifiers(app, settings, [verifier])
        client = TestClient(app)
        token = create_test_token()

        response = client.get("/protected", headers={"Cookie": f"sb-token={token}"})

        assert response.status_code == 200
        assert verifier.calls == [token]

    def test_missing_token(self, app, settings):
        use_verifiers(app, settings, [])
        client = TestClient(app)

        response = client.get("/protected")

        assert response.status_code == 401
        assert response.json()["error"] == "Missing or invalid authorization header"

    def test_rejected_token(self, app, settings, auth_headers):
        use_verifiers(app, settings, [StubVerifier("admin_client", error=RuntimeError("User not found"))])
        client = TestClient(app)

        response = client.get("/protected", headers=auth_headers)

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_expired_token(self, app, settings, auth_headers):
        use_verifiers(app, settings, [StubVerifier("admin_client", error=RuntimeError("token is expired"))])
        client = TestClient(app)

        response = client.get("/protected", headers=auth_headers)

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"


class TestGetOptionalUser:
    def test_anonymous(self, app, settings):
        use_verifiers(app, settings, [])
        client = TestClient(app)

        response = client.get("/public")

        assert response.status_code == 200
        assert response.json() == {"user_id": None}

    def test_authenticated(self, app, settings, test_user, auth_headers):
        use_verifiers(app, settings, [StubVerifier("admin_client", user=test_user)])
        client = TestClient(app)

        assert client.get("/public", headers=auth_headers).json() == {"user_id": test_user.id}
