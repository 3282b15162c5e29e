from logging import getLogger
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
)
from urllib.parse import quote, urlencode, urlsplit

from pydantic import TypeAdapter

from .._utils._credentials import CredentialSource, as_credential_provider
from .._utils._request_body import (
    JsonBody,
    MultipartBody,
    RawBody,
    RequestBody,
    as_request_body,
)
from .._utils.constants import (
    APPLICATION_JSON,
    APPLICATION_PROBLEM_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    NO_CONTENT_STATUS_CODES,
)
from ..models.errors import InvalidBaseUrlError
from ._outcome import Failure, HttpError, Outcome, Success, is_unauthorized
from ._session_refresh import dispatch_with_session_refresh
from ._transport import (
    CredentialsMode,
    HttpxTransport,
    Transport,
    TransportRequest,
    TransportResponse,
)

if TYPE_CHECKING:
    from ._session_refresh import SessionRefresher

logger = getLogger(__name__)

T = TypeVar("T")

QueryValue = Union[str, int, float, bool, None]

_ABSOLUTE_PREFIXES = ("http://", "https://")


def _strip_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def _validate_base_url(base_url: str) -> str:
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidBaseUrlError(base_url)
    return _strip_trailing_slash(base_url)


def _with_header(
    headers: Mapping[str, str], name: str, value: Optional[str]
) -> dict[str, str]:
    """Copy of ``headers`` with ``name`` set, matching names case-insensitively.

    A ``None`` value removes the header.
    """
    merged = {k: v for k, v in headers.items() if k.lower() != name.lower()}
    if value is not None:
        merged[name] = value
    return merged


def _stringify(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestBuilder:
    """Immutable description of an in-progress request.

    ``path`` and ``query`` return new builders and never touch the receiver,
    so one builder can serve as a template for any number of concurrent
    calls. Terminal verbs (``get``, ``post``, ``patch``, ``delete``) dispatch
    exactly once and return an :data:`Outcome` instead of raising.

    Examples:
        ```python
        builder = RequestBuilder("https://taco4graphnode.online", access_token=token)

        outcome = await builder.path("/v1/me").get()
        if outcome.ok:
            print(outcome.data)
        else:
            print(outcome.error.message)
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[Transport] = None,
        headers: Optional[Mapping[str, str]] = None,
        credentials: CredentialsMode = "include",
        access_token: Optional[CredentialSource] = None,
        session_refresher: Optional["SessionRefresher"] = None,
    ) -> None:
        self._base_url = _validate_base_url(base_url)
        self._transport: Transport = transport or HttpxTransport(origin=self._base_url)
        merged_headers = {HEADER_ACCEPT: APPLICATION_JSON}
        for name, value in (headers or {}).items():
            merged_headers = _with_header(merged_headers, name, value)
        self._headers: Mapping[str, str] = MappingProxyType(merged_headers)
        self._credentials: CredentialsMode = credentials
        self._credential_provider = as_credential_provider(access_token)
        self._session_refresher = session_refresher
        self._segments: tuple[str, ...] = ()
        self._query: Mapping[str, str] = MappingProxyType({})

    def _derive(
        self,
        *,
        base_url: Optional[str] = None,
        segments: Optional[Sequence[str]] = None,
        query: Optional[Mapping[str, str]] = None,
        session_refresher: Any = ...,
    ) -> "RequestBuilder":
        derived = object.__new__(RequestBuilder)
        derived.__dict__.update(self.__dict__)
        if base_url is not None:
            derived._base_url = base_url
        if segments is not None:
            derived._segments = tuple(segments)
        if query is not None:
            derived._query = MappingProxyType(dict(query))
        if session_refresher is not ...:
            derived._session_refresher = session_refresher
        return derived

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    @property
    def transport(self) -> Transport:
        return self._transport

    def path(self, segment: str) -> "RequestBuilder":
        """Append path segments, or rebase onto an absolute URL.

        ``segment`` is split on ``/`` and empty components are dropped, so
        ``"/v1/me"``, ``"v1/me/"`` and ``"v1//me"`` are equivalent. An
        ``http(s)://`` URL replaces the base, segments and query, keeping
        headers, credentials and transport.
        """
        if not segment:
            return self
        if segment.startswith(_ABSOLUTE_PREFIXES):
            return self._derive(
                base_url=_strip_trailing_slash(segment), segments=(), query={}
            )
        parts = [part for part in segment.split("/") if part]
        return self._derive(segments=(*self._segments, *parts))

    def query(self, params: Optional[Mapping[str, QueryValue]] = None) -> "RequestBuilder":
        """Merge query parameters; ``None`` values are skipped."""
        if not params:
            return self
        merged = dict(self._query)
        for key, value in params.items():
            if value is None:
                continue
            merged[key] = _stringify(value)
        return self._derive(query=merged)

    def with_session_refresher(
        self, session_refresher: Optional["SessionRefresher"]
    ) -> "RequestBuilder":
        return self._derive(session_refresher=session_refresher)

    def url(self) -> str:
        path = ""
        if self._segments:
            path = "/" + "/".join(quote(s, safe="!'()*") for s in self._segments)
        query_string = urlencode(self._query)
        return self._base_url + path + (f"?{query_string}" if query_string else "")

    async def get(self, *, model: Optional[Type[T]] = None) -> Outcome[Any]:
        return await self.send("GET", model=model)

    async def post(self, body: Any = None, *, model: Optional[Type[T]] = None) -> Outcome[Any]:
        return await self.send("POST", body, model=model)

    async def patch(self, body: Any = None, *, model: Optional[Type[T]] = None) -> Outcome[Any]:
        return await self.send("PATCH", body, model=model)

    async def delete(self, body: Any = None, *, model: Optional[Type[T]] = None) -> Outcome[Any]:
        return await self.send("DELETE", body, model=model)

    async def send(
        self,
        method: str,
        body: Any = None,
        *,
        model: Optional[Type[T]] = None,
    ) -> Outcome[Any]:
        """Dispatch the request and classify the response.

        Args:
            method: HTTP method.
            body: A :class:`JsonBody`, :class:`MultipartBody` or :class:`RawBody`;
                any other non-``None`` value is sent as JSON.
            model: Optional type the decoded payload is validated into.

        Returns:
            Outcome: ``Success`` for 2xx responses, ``Failure`` otherwise. A
            ``Failure`` with ``status_code == 0`` means no usable response
            was obtained.
        """
        request_body = as_request_body(body)
        return await dispatch_with_session_refresh(
            lambda: self._dispatch(method, request_body, model),
            self._session_refresher,
            is_unauthorized,
        )

    async def send_raw(self, method: str, body: Any = None) -> TransportResponse:
        """Dispatch without decoding the response.

        For binary or streamed payloads. Transport errors propagate to the
        caller.
        """
        request_body = as_request_body(body)
        return await dispatch_with_session_refresh(
            lambda: self._transport(self._build_transport_request(method, request_body)),
            self._session_refresher,
            lambda response: response.status_code == 401,
        )

    def _build_transport_request(
        self, method: str, body: Optional[RequestBody]
    ) -> TransportRequest:
        headers = dict(self._headers)

        if self._credential_provider is not None:
            token = self._credential_provider.resolve()
            if token:
                headers = _with_header(headers, HEADER_AUTHORIZATION, f"Bearer {token}")

        content: Optional[Union[bytes, str]] = None
        multipart: Optional[MultipartBody] = None
        if isinstance(body, MultipartBody):
            # httpx writes the multipart boundary into Content-Type.
            headers = _with_header(headers, HEADER_CONTENT_TYPE, None)
            multipart = body
        elif isinstance(body, JsonBody):
            headers = _with_header(headers, HEADER_CONTENT_TYPE, body.content_type)
            content = body.encode()
        elif isinstance(body, RawBody):
            if body.content_type:
                headers = _with_header(headers, HEADER_CONTENT_TYPE, body.content_type)
            content = body.content

        return TransportRequest(
            method=method,
            url=self.url(),
            headers=headers,
            content=content,
            multipart=multipart,
            credentials=self._credentials,
        )

    async def _dispatch(
        self,
        method: str,
        body: Optional[RequestBody],
        model: Optional[Type[T]],
    ) -> Outcome[Any]:
        try:
            request = self._build_transport_request(method, body)
            response = await self._transport(request)
            payload = _read_payload(response)

            if not 200 <= response.status_code < 300:
                logger.debug(f"{method} {request.url} -> {response.status_code}")
                return Failure(
                    HttpError(
                        status_code=response.status_code,
                        message=f"HTTP {response.status_code}: {response.reason_phrase}",
                        body=payload,
                    )
                )

            if model is not None and payload is not None:
                payload = TypeAdapter(model).validate_python(payload)

            logger.debug(f"{method} {request.url} -> {response.status_code}")
            return Success(data=payload, status_code=response.status_code)
        except Exception as e:
            logger.debug(f"{method} {self.url()} failed: {e!r}")
            return Failure(HttpError(status_code=0, message=str(e) or type(e).__name__))


def _read_payload(response: TransportResponse) -> Any:
    if (
        response.status_code in NO_CONTENT_STATUS_CODES
        or response.headers.get(HEADER_CONTENT_LENGTH) == "0"
    ):
        return None

    content_type = response.headers.get(HEADER_CONTENT_TYPE) or ""
    if APPLICATION_JSON in content_type or APPLICATION_PROBLEM_JSON in content_type:
        return response.json()
    return response.text


def create_request_builder(base_url: str, **kwargs: Any) -> RequestBuilder:
    return RequestBuilder(base_url, **kwargs)
