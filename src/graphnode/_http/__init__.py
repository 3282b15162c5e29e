from ._outcome import Failure, HttpError, Outcome, Success, is_unauthorized
from ._request_builder import RequestBuilder, create_request_builder
from ._session_refresh import SessionRefresher, dispatch_with_session_refresh
from ._transport import (
    CredentialsMode,
    HttpxTransport,
    Transport,
    TransportRequest,
    TransportResponse,
    parse_retry_after,
)

__all__ = [
    "CredentialsMode",
    "Failure",
    "HttpError",
    "HttpxTransport",
    "Outcome",
    "RequestBuilder",
    "SessionRefresher",
    "Success",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "create_request_builder",
    "dispatch_with_session_refresh",
    "is_unauthorized",
    "parse_retry_after",
]
