from .._http import Outcome
from ..models import HealthResponse
from ._base_service import BaseService


class HealthService(BaseService):
    """Liveness probe of the API."""

    async def get(self) -> Outcome[HealthResponse]:
        return await self._request.path("/healthz").get(model=HealthResponse)
