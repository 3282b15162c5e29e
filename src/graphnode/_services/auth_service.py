import webbrowser
from typing import Literal

from .._http import Outcome, RequestBuilder, SessionRefresher
from ._base_service import BaseService

LoginProvider = Literal["google", "apple"]


class AuthService(BaseService):
    """Session endpoints and OAuth entry points.

    The OAuth exchanges happen server side; the SDK only knows where they
    start.
    """

    _base_path = "/auth"

    def __init__(
        self, request_builder: RequestBuilder, session_refresher: SessionRefresher
    ) -> None:
        super().__init__(request_builder.with_session_refresher(None))
        self._session_refresher = session_refresher

    async def refresh(self) -> bool:
        """Exchange the refresh cookie for a new access token."""
        return await self._session_refresher.refresh()

    async def logout(self) -> Outcome[None]:
        return await self._request.path("/logout").post()

    def start_url(self, provider: LoginProvider) -> str:
        return self._request.path(f"/{provider}/start").url()

    def google_start_url(self) -> str:
        return self.start_url("google")

    def apple_start_url(self) -> str:
        return self.start_url("apple")

    def login(self, provider: LoginProvider = "google") -> bool:
        """Open the provider's login page in the default browser."""
        url = self.start_url(provider)
        self._logger.info(f"Opening {url}")
        return webbrowser.open(url)
