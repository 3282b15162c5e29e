from datetime import datetime
from typing import Optional, Union

from .._http import Outcome
from ..models import SyncPullResponse, SyncPushRequest, SyncPushResponse
from ._base_service import BaseService


class SyncService(BaseService):
    """Offline sync: pull changes since a timestamp, push local changes."""

    _base_path = "/v1/sync"

    async def pull(
        self, since: Optional[Union[str, datetime]] = None
    ) -> Outcome[SyncPullResponse]:
        """Pull records changed after ``since``.

        Args:
            since: ISO 8601 string or datetime. ``None`` pulls everything.
        """
        if isinstance(since, datetime):
            since = since.isoformat()
        return await (
            self._request.path("/pull")
            .query({"since": since})
            .get(model=SyncPullResponse)
        )

    async def push(self, data: SyncPushRequest) -> Outcome[SyncPushResponse]:
        return await self._request.path("/push").post(
            self._json(data), model=SyncPushResponse
        )
