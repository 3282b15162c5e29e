import logging
import sys
from typing import Mapping

from .constants import HEADER_AUTHORIZATION, HEADER_COOKIE

_SENSITIVE_HEADERS = {HEADER_AUTHORIZATION.lower(), HEADER_COOKIE.lower()}
_REDACTED = "***"

logger = logging.getLogger("graphnode")


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` safe to write to logs."""
    return {
        name: _REDACTED if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def setup_logging(should_debug: bool = False) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
