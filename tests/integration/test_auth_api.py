"""Integration tests for authentication."""

import pytest
from fastapi import status
from httpx import AsyncClient

from crmdesk.core.security import create_jwt_token
TEST_PASSWORD = "testpassword"


@pytest.mark.integration
class TestAuthAPI:
    @pytest.mark.asyncio
    async def test_login_issues_token_and_tracks_session(
        self, async_client: AsyncClient, test_user
    ):
        response = await async_client.post(
            "/api/auth/token",
            data={"username": "testuser", "password": TEST_PASSWORD},
            headers={"User-Agent": "Mozilla/5.0 (X11; Linux x86_64) Firefox/121.0"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["username"] == "testuser"
        assert "password_hash" not in data["user"]

        headers = {"Authorization": f"Bearer {data['access_token']}"}
        sessions = (await async_client.get("/api/sessions", headers=headers)).json()
        assert len(sessions) == 1
        assert sessions[0]["is_current"] is True
        assert sessions[0]["device_info"] == {"browser": "Firefox", "os": "Linux"}

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(
        self, async_client: AsyncClient, test_user
    ):
        response = await async_client.post(
            "/api/auth/token", data={"username": "testuser", "password": "nope"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_logout_deactivates_session(
        self, async_client: AsyncClient, test_user
    ):
        login = await async_client.post(
            "/api/auth/token", data={"username": "testuser", "password": TEST_PASSWORD}
        )
        headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

        response = await async_client.post("/api/auth/logout", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        assert (await async_client.get("/api/sessions", headers=headers)).json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Bearer not-a-jwt"},
            {"Authorization": "Basic dXNlcjpwYXNz"},
        ],
    )
    async def test_protected_route_requires_valid_token(
        self, async_client: AsyncClient, headers
    ):
        response = await async_client.get("/api/dashboard/preferences", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, async_client: AsyncClient):
        headers = {"Authorization": f"Bearer {create_jwt_token('ghost')}"}
        response = await async_client.get("/api/profile", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
