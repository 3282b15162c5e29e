from ._config import Config, resolve_config
from ._http import (
    Failure,
    HttpError,
    HttpxTransport,
    Outcome,
    RequestBuilder,
    SessionRefresher,
    Success,
    Transport,
    TransportRequest,
    TransportResponse,
    create_request_builder,
)
from ._utils import (
    CredentialProvider,
    JsonBody,
    MultipartBody,
    MutableCredential,
    RawBody,
    StaticCredential,
)
from .client import GraphNodeClient, create_graphnode_client
from .models import GraphNodeHttpError, InvalidBaseUrlError, ProblemDetails

__all__ = [
    "Config",
    "CredentialProvider",
    "Failure",
    "GraphNodeClient",
    "GraphNodeHttpError",
    "HttpError",
    "HttpxTransport",
    "InvalidBaseUrlError",
    "JsonBody",
    "MultipartBody",
    "MutableCredential",
    "Outcome",
    "ProblemDetails",
    "RawBody",
    "RequestBuilder",
    "SessionRefresher",
    "StaticCredential",
    "Success",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "create_graphnode_client",
    "create_request_builder",
    "resolve_config",
]
