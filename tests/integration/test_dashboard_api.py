"""Integration tests for the dashboard endpoints."""

import pytest
from fastapi import status
from httpx import AsyncClient

from crmdesk.core.widgets import DEFAULT_VISIBLE_WIDGETS, WIDGET_KEYS


@pytest.mark.integration
class TestDashboardAPI:
    @pytest.mark.asyncio
    async def test_defaults_for_new_user(
        self, async_client: AsyncClient, auth_headers_user
    ):
        response = await async_client.get(
            "/api/dashboard/preferences", headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["visible_widgets"] == DEFAULT_VISIBLE_WIDGETS
        assert data["card_order"] == WIDGET_KEYS
        assert data["layout"] == {}

    @pytest.mark.asyncio
    async def test_save_compacts_and_persists(
        self, async_client: AsyncClient, auth_headers_user
    ):
        payload = {
            "visible_widgets": ["leads", "deals", "bogus"],
            "card_order": ["deals", "leads"],
            "layout": {
                "leads": {"x": 0, "y": 0, "w": 3, "h": 2},
                "deals": {"x": 6, "y": 5, "w": 3, "h": 2},
                "contacts": {"x": 3, "y": 0, "w": 3, "h": 2},
            },
        }

        response = await async_client.put(
            "/api/dashboard/preferences", json=payload, headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        saved = response.json()
        assert saved["visible_widgets"] == ["leads", "deals"]
        assert saved["card_order"] == ["deals", "leads"]
        assert saved["layout"] == {
            "leads": {"x": 0, "y": 0, "w": 3, "h": 2},
            "deals": {"x": 3, "y": 0, "w": 3, "h": 2},
        }

        reloaded = await async_client.get(
            "/api/dashboard/preferences", headers=auth_headers_user
        )
        assert reloaded.json() == saved

    @pytest.mark.asyncio
    async def test_dashboards_are_per_user(
        self, async_client: AsyncClient, auth_headers_user, auth_headers_other
    ):
        await async_client.put(
            "/api/dashboard/preferences",
            json={"visible_widgets": ["leads"], "layout": {}},
            headers=auth_headers_user,
        )

        response = await async_client.get(
            "/api/dashboard/preferences", headers=auth_headers_other
        )

        assert response.json()["visible_widgets"] == DEFAULT_VISIBLE_WIDGETS

    @pytest.mark.asyncio
    async def test_reset_returns_defaults(
        self, async_client: AsyncClient, auth_headers_user
    ):
        await async_client.put(
            "/api/dashboard/preferences",
            json={"visible_widgets": ["leads"], "layout": {}},
            headers=auth_headers_user,
        )

        response = await async_client.delete(
            "/api/dashboard/preferences", headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["visible_widgets"] == DEFAULT_VISIBLE_WIDGETS

    @pytest.mark.asyncio
    async def test_apply_widget_changes(
        self, async_client: AsyncClient, auth_headers_user
    ):
        payload = {
            "visible_widgets": ["leads", "deals"],
            "card_order": ["leads", "deals"],
            "layout": {
                "leads": {"x": 0, "y": 0, "w": 6, "h": 2},
                "deals": {"x": 6, "y": 0, "w": 6, "h": 2},
            },
            "pending": ["deals", "emailStats"],
        }

        response = await async_client.post(
            "/api/dashboard/preferences/changes",
            json=payload,
            headers=auth_headers_user,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["visible_widgets"] == ["leads", "emailStats"]
        assert data["card_order"] == ["leads", "emailStats"]
        assert data["layout"] == {
            "leads": {"x": 0, "y": 0, "w": 6, "h": 2},
            "emailStats": {"x": 6, "y": 0, "w": 3, "h": 2},
        }

    @pytest.mark.asyncio
    async def test_apply_unknown_widget(
        self, async_client: AsyncClient, auth_headers_user
    ):
        payload = {
            "visible_widgets": ["leads"],
            "card_order": ["leads"],
            "layout": {},
            "pending": ["weather"],
        }

        response = await async_client.post(
            "/api/dashboard/preferences/changes",
            json=payload,
            headers=auth_headers_user,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "weather" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_widget_catalog(self, async_client: AsyncClient, auth_headers_user):
        response = await async_client.get(
            "/api/dashboard/widgets", headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        catalog = response.json()
        assert [widget["key"] for widget in catalog] == WIDGET_KEYS
        visible = [widget["key"] for widget in catalog if widget["visible"]]
        assert visible == DEFAULT_VISIBLE_WIDGETS

    @pytest.mark.asyncio
    async def test_compact_endpoint(self, async_client: AsyncClient, auth_headers_user):
        payload = {
            "layout": {
                "a": {"x": 0, "y": 0, "w": 4, "h": 2},
                "b": {"x": 4, "y": 0, "w": 4, "h": 2},
                "c": {"x": 0, "y": 4, "w": 4, "h": 2},
            },
            "visible_widgets": ["a", "c"],
        }

        response = await async_client.post(
            "/api/dashboard/layout/compact", json=payload, headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "a": {"x": 0, "y": 0, "w": 4, "h": 2},
            "c": {"x": 4, "y": 0, "w": 4, "h": 2},
        }

    @pytest.mark.asyncio
    async def test_free_slot_endpoint(
        self, async_client: AsyncClient, auth_headers_user
    ):
        payload = {
            "layout": {"a": {"x": 0, "y": 0, "w": 12, "h": 1}},
            "width": 3,
            "height": 2,
        }

        response = await async_client.post(
            "/api/dashboard/layout/free-slot", json=payload, headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"x": 0, "y": 1}

    @pytest.mark.asyncio
    async def test_overflowing_placement_is_rejected(
        self, async_client: AsyncClient, auth_headers_user
    ):
        payload = {
            "layout": {"a": {"x": 10, "y": 0, "w": 4, "h": 1}},
            "visible_widgets": ["a"],
        }

        response = await async_client.post(
            "/api/dashboard/layout/compact", json=payload, headers=auth_headers_user
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_summary_for_empty_account(
        self, async_client: AsyncClient, auth_headers_user
    ):
        response = await async_client.get(
            "/api/dashboard/summary", headers=auth_headers_user
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["leads"]["total"] == 0
        assert data["deals"]["total_pipeline"] == 0.0
        assert data["email_stats"]["open_rate"] == 0
        assert data["tasks"]["tasks"] == []

    @pytest.mark.asyncio
    async def test_summary_counts_created_records(
        self, async_client: AsyncClient, auth_headers_user
    ):
        await async_client.post(
            "/api/records/leads",
            json={"lead_name": "Acme", "lead_status": "Qualified"},
            headers=auth_headers_user,
        )

        response = await async_client.get(
            "/api/dashboard/summary", headers=auth_headers_user
        )

        leads = response.json()["leads"]
        assert leads["total"] == 1
        assert leads["qualified"] == 1
        assert leads["recent_lead"] == "Acme"

    @pytest.mark.asyncio
    async def test_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/dashboard/layout/free-slot", json={"layout": {}}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
