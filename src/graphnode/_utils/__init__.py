from ._credentials import (
    CallableCredential,
    CredentialProvider,
    CredentialSource,
    MutableCredential,
    StaticCredential,
    as_credential_provider,
)
from ._logs import redact_headers, setup_logging
from ._request_body import JsonBody, MultipartBody, RawBody, RequestBody, as_request_body

__all__ = [
    "CallableCredential",
    "CredentialProvider",
    "CredentialSource",
    "MutableCredential",
    "StaticCredential",
    "as_credential_provider",
    "redact_headers",
    "setup_logging",
    "JsonBody",
    "MultipartBody",
    "RawBody",
    "RequestBody",
    "as_request_body",
]
