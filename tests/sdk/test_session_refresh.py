import asyncio

import pytest
from httpx import ConnectError, Response

from graphnode import (
    Failure,
    MutableCredential,
    RequestBuilder,
    SessionRefresher,
    Success,
    TransportRequest,
)
from tests.utils.transport import StubTransport

THING = "/v1/thing"
REFRESH = "/auth/refresh"


def refreshing_builder(
    base_url: str, transport, credential: MutableCredential | None = None
) -> RequestBuilder:
    root = RequestBuilder(base_url, transport=transport, access_token=credential)
    refresher = SessionRefresher(
        root.path(REFRESH),
        on_access_token=credential.set if credential else None,
    )
    return root.with_session_refresher(refresher)


class TestSessionRefresh:
    @pytest.mark.anyio
    async def test_401_then_refresh_then_success(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401), Response(200, json={"id": "thing"})],
                REFRESH: [Response(200, json={"ok": True})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        outcome = await builder.path(THING).get()

        assert outcome == Success(data={"id": "thing"}, status_code=200)
        assert len(transport.calls(THING)) == 2
        assert len(transport.calls(REFRESH)) == 1
        assert [r.url for r in transport.requests] == [
            f"{base_url}{THING}",
            f"{base_url}{REFRESH}",
            f"{base_url}{THING}",
        ]

    @pytest.mark.anyio
    async def test_refresh_failure_returns_original_401(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401, json={"title": "token expired"})],
                REFRESH: [Response(401, json={"ok": False, "error": "Refresh failed"})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        outcome = await builder.path(THING).get()

        assert isinstance(outcome, Failure)
        assert outcome.error.status_code == 401
        assert outcome.error.body == {"title": "token expired"}
        assert len(transport.calls(THING)) == 1
        assert len(transport.calls(REFRESH)) == 1

    @pytest.mark.anyio
    async def test_refresh_network_error_returns_original_401(self, base_url: str):
        transport = StubTransport(
            {THING: [Response(401)], REFRESH: [ConnectError("offline")]}
        )
        builder = refreshing_builder(base_url, transport)

        outcome = await builder.path(THING).get()

        assert not outcome.ok
        assert outcome.error.status_code == 401
        assert len(transport.calls(THING)) == 1

    @pytest.mark.anyio
    async def test_retry_result_is_final(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401, json={"attempt": 1}), Response(401, json={"attempt": 2})],
                REFRESH: [Response(200, json={"ok": True})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        outcome = await builder.path(THING).get()

        assert not outcome.ok
        assert outcome.error.body == {"attempt": 2}
        assert len(transport.calls(THING)) == 2
        assert len(transport.calls(REFRESH)) == 1

    @pytest.mark.anyio
    @pytest.mark.parametrize("status_code", [400, 403, 500])
    async def test_other_failures_do_not_refresh(self, base_url: str, status_code: int):
        transport = StubTransport(
            {THING: [Response(status_code)], REFRESH: [Response(200)]}
        )
        builder = refreshing_builder(base_url, transport)

        outcome = await builder.path(THING).get()

        assert outcome.error.status_code == status_code
        assert transport.calls(REFRESH) == []

    @pytest.mark.anyio
    async def test_retry_replays_the_original_request(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401), Response(200, json={})],
                REFRESH: [Response(200, json={"ok": True})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        await builder.path(THING).query({"page": 2}).patch({"name": "x"})

        first, second = transport.calls(THING)
        assert first.method == second.method == "PATCH"
        assert first.url == second.url == f"{base_url}{THING}?page=2"
        assert first.content == second.content
        assert first.headers == second.headers

    @pytest.mark.anyio
    async def test_refreshed_token_is_used_for_retry(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401), Response(200, json={})],
                REFRESH: [Response(200, json={"ok": True, "accessToken": "fresh"})],
            }
        )
        credential = MutableCredential("stale")
        builder = refreshing_builder(base_url, transport, credential)

        await builder.path(THING).get()

        first, second = transport.calls(THING)
        assert first.headers["Authorization"] == "Bearer stale"
        assert second.headers["Authorization"] == "Bearer fresh"
        assert credential.resolve() == "fresh"

    @pytest.mark.anyio
    async def test_refresh_request_never_recurses(self, base_url: str):
        transport = StubTransport(
            {THING: [Response(401)], REFRESH: [Response(401)]}
        )
        root = RequestBuilder(base_url, transport=transport)
        refresher = SessionRefresher(root.path(REFRESH))
        # A refresher built from a refreshing builder must not refresh itself.
        recursive = SessionRefresher(root.with_session_refresher(refresher).path(REFRESH))

        outcome = await root.with_session_refresher(recursive).path(THING).get()

        assert outcome.error.status_code == 401
        assert len(transport.calls(REFRESH)) == 1

    @pytest.mark.anyio
    async def test_send_raw_is_retried_after_refresh(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401), Response(200, content=b"binary")],
                REFRESH: [Response(200, json={"ok": True})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        response = await builder.path(THING).send_raw("GET")

        assert response.status_code == 200
        assert response.content == b"binary"
        assert len(transport.calls(REFRESH)) == 1

    @pytest.mark.anyio
    async def test_concurrent_401s_share_one_refresh(self, base_url: str):
        refresh_started = asyncio.Event()
        release_refresh = asyncio.Event()
        refreshed = False
        requests: list[TransportRequest] = []

        async def transport(request: TransportRequest) -> Response:
            nonlocal refreshed
            requests.append(request)
            if request.url.endswith(REFRESH):
                refresh_started.set()
                await release_refresh.wait()
                refreshed = True
                return Response(200, json={"ok": True})
            return Response(200, json={}) if refreshed else Response(401)

        builder = refreshing_builder(base_url, transport)
        calls = [asyncio.ensure_future(builder.path(THING).get()) for _ in range(3)]
        await refresh_started.wait()
        await asyncio.sleep(0)
        release_refresh.set()
        outcomes = await asyncio.gather(*calls)

        assert all(outcome.ok for outcome in outcomes)
        assert sum(r.url.endswith(REFRESH) for r in requests) == 1
        assert sum(r.url.endswith(THING) for r in requests) == 6

    @pytest.mark.anyio
    async def test_sequential_refreshes_are_not_coalesced(self, base_url: str):
        transport = StubTransport(
            {
                THING: [Response(401), Response(200, json={}), Response(401), Response(200, json={})],
                REFRESH: [Response(200, json={"ok": True})],
            }
        )
        builder = refreshing_builder(base_url, transport)

        await builder.path(THING).get()
        await builder.path(THING).get()

        assert len(transport.calls(REFRESH)) == 2
