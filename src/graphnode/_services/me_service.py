from .._http import Outcome
from ..models import ApiKeyModel, ApiKeysResponse, MeResponse
from ._base_service import BaseService


class MeService(BaseService):
    """Profile and provider API keys of the signed-in user."""

    async def get(self) -> Outcome[MeResponse]:
        return await self._request.path("/v1/me").get(model=MeResponse)

    async def logout(self) -> Outcome[None]:
        """End the session. The API answers ``204 No Content``."""
        return await self._request.path("/auth/logout").post()

    async def get_api_key(self, model: ApiKeyModel) -> Outcome[ApiKeysResponse]:
        return await self._request.path(f"/v1/me/api-keys/{model}").get(
            model=ApiKeysResponse
        )

    async def update_api_key(self, model: ApiKeyModel, api_key: str) -> Outcome[None]:
        return await self._request.path(f"/v1/me/api-keys/{model}").patch(
            {"apiKey": api_key}
        )

    async def delete_api_key(self, model: ApiKeyModel) -> Outcome[None]:
        return await self._request.path(f"/v1/me/api-keys/{model}").delete()
