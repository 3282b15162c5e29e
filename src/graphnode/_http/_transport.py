import asyncio
import random
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import (
    Any,
    Awaitable,
    Callable,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Union,
)
from urllib.parse import urlsplit

from httpx import (
    AsyncClient,
    ConnectTimeout,
    Headers,
    Request,
    Response,
    TimeoutException,
    TooManyRedirects,
)
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from .._utils._logs import redact_headers
from .._utils._request_body import FileTypes, MultipartBody
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_COOKIE, HEADER_RETRY_AFTER, IDEMPOTENT_METHODS

logger = getLogger(__name__)

CredentialsMode = Literal["include", "omit", "same-origin"]


@dataclass(frozen=True)
class TransportRequest:
    """Fully resolved request handed to a transport.

    Exactly one of ``content`` and ``multipart`` is set when the request has a
    body. For multipart bodies ``headers`` never contains ``Content-Type``.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[Union[bytes, str]] = None
    multipart: Optional[MultipartBody] = None
    credentials: CredentialsMode = "include"


class TransportResponse(Protocol):
    """What the request builder reads from a transport response.

    ``httpx.Response`` satisfies this protocol.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def headers(self) -> Headers: ...

    @property
    def text(self) -> str: ...

    @property
    def content(self) -> bytes: ...

    def json(self, **kwargs: Any) -> Any: ...


Transport = Callable[[TransportRequest], Awaitable[TransportResponse]]


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, (ConnectTimeout, TimeoutException))


def is_retryable_status_code(response: Response) -> bool:
    return (
        500 <= response.status_code < 600
        and response.request.method in IDEMPOTENT_METHODS
    )


def _last_attempt(retry_state: RetryCallState) -> Response:
    # Return the final response, or re-raise the final exception.
    assert retry_state.outcome is not None
    return retry_state.outcome.result()


def parse_retry_after(headers: Headers) -> float:
    """Parse Retry-After header (RFC 6585/7231).

    Args:
        headers: HTTP response headers

    Returns:
        float: Seconds to wait before retry (minimum 0.0, default 1.0 if missing/invalid).
              RFC 7231 allows 0 to indicate immediate retry.
    """
    DEFAULT_RETRY_AFTER = 1.0
    retry_after = headers.get(HEADER_RETRY_AFTER)
    if not retry_after:
        return DEFAULT_RETRY_AFTER

    try:
        return max(float(retry_after), 0.0)
    except ValueError:
        pass

    try:
        retry_date = parsedate_to_datetime(retry_after)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(delta, 0.0)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER


def _form_value(value: Any) -> Union[str, bytes]:
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _data_as_file_fields(data: Mapping[str, Any]) -> list[tuple[str, FileTypes]]:
    # Form fields without a filename render exactly like plain data fields.
    fields: list[tuple[str, FileTypes]] = []
    for name, value in data.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        fields.extend((name, (None, _form_value(item))) for item in values)
    return fields


def _origin(url: str) -> tuple[str, str, Optional[int]]:
    parts = urlsplit(url)
    return parts.scheme, parts.hostname or "", parts.port


class HttpxTransport:
    """Default transport built on ``httpx.AsyncClient``.

    The client's cookie jar holds the session cookies, including those set by
    the refresh endpoint, and the credential mode decides per request whether
    they are sent. Redirects are followed here, and each hop goes through the
    same cookie check. The ``AsyncClient`` is only created on first use.
    """

    MAX_RETRIES = 3
    MAX_REDIRECTS = 20

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        *,
        origin: Optional[str] = None,
        timeout: float = 30.0,
        max_attempts: int = 3,
        wait: Optional[wait_base] = None,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._origin = _origin(origin) if origin else None
        self._max_attempts = max(max_attempts, 1)
        self._wait = wait or wait_exponential(multiplier=1, min=1, max=10)

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            self._client = AsyncClient(**get_httpx_client_kwargs(self._timeout))
        return self._client

    async def __call__(self, request: TransportRequest) -> Response:
        retrying = AsyncRetrying(
            retry=(
                retry_if_exception(is_retryable_exception)
                | retry_if_result(is_retryable_status_code)
            ),
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry_error_callback=_last_attempt,
        )
        return await retrying(self._send_rate_limited, request)

    async def _send_rate_limited(self, request: TransportRequest) -> Response:
        for attempt in range(self.MAX_RETRIES + 1):
            response = await self._send(request)

            if response.status_code == 429 and attempt < self.MAX_RETRIES:
                retry_after = parse_retry_after(response.headers)
                sleep_time = retry_after + random.uniform(0, 0.1 * retry_after)
                logger.warning(
                    f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                    f"(attempt {attempt + 1}/{self.MAX_RETRIES})"
                )
                await response.aclose()
                await asyncio.sleep(sleep_time)
                continue

            break

        return response

    async def _send(self, request: TransportRequest) -> Response:
        http_request = self._build_request(request)
        for _ in range(self.MAX_REDIRECTS + 1):
            logger.debug(f"Request: {http_request.method} {http_request.url}")
            logger.debug(f"HEADERS: {redact_headers(http_request.headers)}")
            response = await self.client.send(http_request, follow_redirects=False)
            if response.next_request is None:
                return response

            await response.aclose()
            http_request = response.next_request
            if not self._sends_cookies(request.credentials, str(http_request.url)):
                http_request.headers.pop(HEADER_COOKIE, None)

        raise TooManyRedirects(
            "Exceeded maximum allowed redirects.", request=http_request
        )

    def _build_request(self, request: TransportRequest) -> Request:
        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.multipart is not None:
            files = list(request.multipart.files)
            if files:
                kwargs["files"] = files
                kwargs["data"] = dict(request.multipart.data) or None
            else:
                # httpx only encodes multipart when files are present.
                kwargs["files"] = _data_as_file_fields(request.multipart.data) or None
        elif request.content is not None:
            kwargs["content"] = request.content

        http_request = self.client.build_request(
            request.method, request.url, **kwargs
        )
        if not self._sends_cookies(request.credentials, request.url):
            http_request.headers.pop(HEADER_COOKIE, None)
        return http_request

    def _sends_cookies(self, credentials: CredentialsMode, url: str) -> bool:
        if credentials == "omit":
            return False
        if credentials == "same-origin":
            return self._origin is not None and _origin(url) == self._origin
        return True

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
