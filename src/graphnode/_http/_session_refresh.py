"""Refresh-then-retry-once recovery from an expired session.

A logical call goes through at most one refresh and one retry:

* the request is dispatched;
* on 401 the refresh endpoint is called;
* if the refresh succeeds the original request is dispatched once more and
  that result is returned whatever it is;
* if the refresh fails the original 401 is returned unchanged.
"""

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from ._request_builder import RequestBuilder

logger = getLogger(__name__)

R = TypeVar("R")


class SessionRefresher:
    """Calls the refresh endpoint on behalf of a client.

    Concurrent callers that hit 401 at the same time share one in-flight
    refresh and all see its result.

    Args:
        refresh_request: Builder pointing at the refresh endpoint. Any
            refresher attached to it is dropped so a failing refresh cannot
            recurse.
        on_access_token: Called with the new access token when the refresh
            response carries one (``accessToken`` or ``access_token``).
    """

    def __init__(
        self,
        refresh_request: "RequestBuilder",
        *,
        on_access_token: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._refresh_request = refresh_request.with_session_refresher(None)
        self._on_access_token = on_access_token
        self._in_flight: Optional["asyncio.Future[bool]"] = None

    @property
    def url(self) -> str:
        return self._refresh_request.url()

    async def refresh(self) -> bool:
        """Refresh the session, joining a refresh already in progress."""
        task = self._in_flight
        if task is None:
            task = asyncio.ensure_future(self._refresh())
            self._in_flight = task
            task.add_done_callback(self._clear_in_flight)
        return await asyncio.shield(task)

    def _clear_in_flight(self, task: "asyncio.Future[bool]") -> None:
        if self._in_flight is task:
            self._in_flight = None

    async def _refresh(self) -> bool:
        outcome = await self._refresh_request.post()
        if not outcome.ok:
            logger.warning(f"Session refresh failed: {outcome.error.message}")
            return False

        data = outcome.data
        if isinstance(data, dict) and self._on_access_token is not None:
            token = data.get("accessToken") or data.get("access_token")
            if token:
                self._on_access_token(token)

        logger.debug("Session refreshed")
        return True


async def dispatch_with_session_refresh(
    dispatch: Callable[[], Awaitable[R]],
    session_refresher: Optional[SessionRefresher],
    is_unauthorized: Callable[[R], bool],
) -> R:
    result = await dispatch()
    if session_refresher is None or not is_unauthorized(result):
        return result

    logger.debug("Received 401, refreshing session before retrying once")
    if not await session_refresher.refresh():
        return result
    return await dispatch()
