from unittest.mock import patch

import pytest
from pytest_httpx import HTTPXMock

from graphnode import GraphNodeClient


class TestAuthService:
    def test_start_urls(self, client: GraphNodeClient, base_url: str):
        assert client.auth.google_start_url() == f"{base_url}/auth/google/start"
        assert client.auth.apple_start_url() == f"{base_url}/auth/apple/start"

    def test_login_opens_browser(self, client: GraphNodeClient, base_url: str):
        with patch("webbrowser.open", return_value=True) as mock_open:
            assert client.auth.login("apple") is True
        mock_open.assert_called_once_with(f"{base_url}/auth/apple/start")

    @pytest.mark.anyio
    async def test_refresh_failure(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/auth/refresh",
            method="POST",
            status_code=401,
            json={"ok": False, "error": "Refresh failed"},
        )

        assert await client.auth.refresh() is False

    @pytest.mark.anyio
    async def test_logout_is_not_refreshed(
        self, httpx_mock: HTTPXMock, client: GraphNodeClient, base_url: str
    ):
        httpx_mock.add_response(url=f"{base_url}/auth/logout", method="POST", status_code=401)

        outcome = await client.auth.logout()

        assert outcome.error.status_code == 401
        assert len(httpx_mock.get_requests()) == 1
