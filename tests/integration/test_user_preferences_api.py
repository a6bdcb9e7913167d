"""Integration tests for display and notification preferences."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.integration
class TestUserPreferencesAPI:
    @pytest.mark.asyncio
    async def test_display_defaults(self, async_client: AsyncClient, auth_headers_user):
        response = await async_client.get(
            "/api/user-preferences/display", headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "theme": "system",
            "date_format": "DD/MM/YYYY",
            "time_format": "12h",
            "currency": "INR",
            "default_module": "dashboard",
        }

    @pytest.mark.asyncio
    async def test_camel_case_update_and_reset(
        self, async_client: AsyncClient, auth_headers_user
    ):
        response = await async_client.put(
            "/api/user-preferences/display",
            json={"theme": "dark", "dateFormat": "YYYY-MM-DD", "timeFormat": "24h"},
            headers=auth_headers_user,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["theme"] == "dark"
        assert data["date_format"] == "YYYY-MM-DD"
        assert data["time_format"] == "24h"
        assert data["currency"] == "INR"

        reset = await async_client.delete(
            "/api/user-preferences/display", headers=auth_headers_user
        )
        assert reset.json()["theme"] == "system"
        stored = await async_client.get(
            "/api/user-preferences/display", headers=auth_headers_user
        )
        assert stored.json()["date_format"] == "DD/MM/YYYY"

    @pytest.mark.asyncio
    async def test_invalid_theme(self, async_client: AsyncClient, auth_headers_user):
        response = await async_client.put(
            "/api/user-preferences/display",
            json={"theme": "neon"},
            headers=auth_headers_user,
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_notification_preferences(
        self, async_client: AsyncClient, auth_headers_user
    ):
        defaults = await async_client.get(
            "/api/user-preferences/notifications", headers=auth_headers_user
        )
        assert defaults.json()["push_notifications"] is False

        payload = {**defaults.json(), "push_notifications": True}
        payload["notification_frequency"] = "daily"
        saved = await async_client.put(
            "/api/user-preferences/notifications",
            json=payload,
            headers=auth_headers_user,
        )

        assert saved.status_code == status.HTTP_200_OK
        reloaded = await async_client.get(
            "/api/user-preferences/notifications", headers=auth_headers_user
        )
        assert reloaded.json() == payload
