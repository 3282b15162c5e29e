from typing import Any


class InvalidBaseUrlError(ValueError):
    """Raised when a request builder is created with a malformed base URL."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        self.message = (
            f"Invalid base URL '{base_url}'. Expected an absolute http(s) URL "
            f"such as https://taco4graphnode.online or set GRAPHNODE_BASE_URL."
        )
        super().__init__(self.message)


class GraphNodeHttpError(Exception):
    """Raised by ``Failure.unwrap()`` for callers that prefer exceptions.

    Terminal request verbs never raise this themselves; they return a
    ``Failure`` outcome carrying the same fields.
    """

    def __init__(self, status_code: int, message: str, body: Any = None):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(message)
