from logging import getLogger
from typing import Mapping, Optional

from ._config import Config, resolve_config
from ._http import (
    CredentialsMode,
    HttpxTransport,
    RequestBuilder,
    SessionRefresher,
    Transport,
)
from ._services import (
    AuthService,
    ConversationsService,
    FilesService,
    HealthService,
    MeService,
    NotesService,
    NotificationsService,
    SyncService,
)
from ._utils._credentials import MutableCredential
from ._utils.constants import REFRESH_PATH

logger = getLogger(__name__)


class GraphNodeClient:
    """Entry point of the SDK.

    The client owns the access token cell, the root request builder and the
    session refresher; every service shares them. Calls that fail with 401
    refresh the session once through ``POST /auth/refresh`` and are retried
    once.

    Args:
        base_url: API origin. Defaults to ``GRAPHNODE_BASE_URL`` or the
            production API.
        access_token: Initial bearer token. Defaults to
            ``GRAPHNODE_ACCESS_TOKEN``. Cookie based sessions work without one.
        transport: Custom transport. Defaults to :class:`HttpxTransport`.
        headers: Extra headers sent with every request.
        credentials: Whether session cookies accompany requests.

    Examples:
        ```python
        async with GraphNodeClient(access_token=token) as client:
            outcome = await client.notes.list_notes()
            if outcome.ok:
                for note in outcome.data:
                    print(note.title)
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        access_token: Optional[str] = None,
        transport: Optional[Transport] = None,
        headers: Optional[Mapping[str, str]] = None,
        credentials: Optional[CredentialsMode] = None,
        config: Optional[Config] = None,
    ) -> None:
        if config is None:
            overrides = {"credentials": credentials} if credentials else {}
            config = resolve_config(base_url, access_token, **overrides)
        self._config = config

        self._credential = MutableCredential(config.access_token)
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(
            origin=config.base_url,
            timeout=config.timeout,
            max_attempts=config.max_attempts,
        )

        root = RequestBuilder(
            config.base_url,
            transport=self._transport,
            headers=headers,
            credentials=config.credentials,
            access_token=self._credential,
        )
        self._session_refresher = SessionRefresher(
            root.path(REFRESH_PATH), on_access_token=self._credential.set
        )
        self._request = root.with_session_refresher(self._session_refresher)

        self.health = HealthService(self._request)
        self.me = MeService(self._request)
        self.conversations = ConversationsService(self._request)
        self.notes = NotesService(self._request)
        self.sync = SyncService(self._request)
        self.files = FilesService(self._request)
        self.notifications = NotificationsService(self._request)
        self.auth = AuthService(self._request, self._session_refresher)

        logger.debug(f"GraphNode client for {config.base_url}")

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def request(self) -> RequestBuilder:
        """Root builder, for endpoints without a dedicated service."""
        return self._request

    def set_access_token(self, token: Optional[str]) -> None:
        """Replace the bearer token; ``None`` signs out of token auth."""
        self._credential.set(token)

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> "GraphNodeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_graphnode_client(**kwargs) -> GraphNodeClient:
    return GraphNodeClient(**kwargs)
