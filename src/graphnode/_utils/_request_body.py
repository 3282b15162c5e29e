import json
from dataclasses import dataclass, field
from typing import IO, Any, Mapping, Optional, Sequence, Tuple, Union

from pydantic_core import to_jsonable_python

from .constants import APPLICATION_JSON

FileContent = Union[IO[bytes], bytes, str]
FileTypes = Union[
    FileContent,
    Tuple[Optional[str], FileContent],
    Tuple[Optional[str], FileContent, Optional[str]],
]


@dataclass(frozen=True)
class JsonBody:
    """A body serialized to JSON text with ``Content-Type: application/json``.

    Pydantic models are dumped by alias, so DTOs with camelCase aliases reach
    the server in their wire shape.
    """

    value: Any

    content_type = APPLICATION_JSON

    def encode(self) -> str:
        return json.dumps(to_jsonable_python(self.value, by_alias=True))


@dataclass(frozen=True)
class MultipartBody:
    """A multipart/form-data body.

    The transport computes the boundary and writes the ``Content-Type``
    header itself; the request builder never sets it for this variant.
    """

    files: Sequence[Tuple[str, FileTypes]] = ()
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RawBody:
    """Pre-encoded bytes or text sent as is."""

    content: Union[bytes, str]
    content_type: Optional[str] = None


RequestBody = Union[JsonBody, MultipartBody, RawBody]


def as_request_body(body: Any) -> Optional[RequestBody]:
    """Wrap a plain value in :class:`JsonBody`; pass body variants through."""
    if body is None:
        return None
    if isinstance(body, (JsonBody, MultipartBody, RawBody)):
        return body
    return JsonBody(body)
