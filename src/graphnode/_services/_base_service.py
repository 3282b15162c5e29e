from logging import getLogger
from typing import Any

from pydantic import BaseModel

from .._http import RequestBuilder
from .._utils._request_body import JsonBody


class BaseService:
    """Shared plumbing for endpoint groups.

    A service keeps the builder it was given, narrowed to its own path
    prefix, and derives a fresh builder for every call.
    """

    _base_path: str = ""

    def __init__(self, request_builder: RequestBuilder) -> None:
        self._logger = getLogger("graphnode")
        self._request = request_builder.path(self._base_path)

    @property
    def base_url(self) -> str:
        return self._request.url()

    @staticmethod
    def _json(dto: Any) -> JsonBody:
        """Serialize a DTO keeping only the fields the caller set."""
        if isinstance(dto, BaseModel):
            return JsonBody(dto.model_dump(mode="json", by_alias=True, exclude_unset=True))
        return JsonBody(dto)
