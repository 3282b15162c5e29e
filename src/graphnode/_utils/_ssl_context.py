import os
import ssl
from typing import Any, Optional

import truststore

CA_BUNDLE_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """TLS context trusting the OS store plus any configured CA bundle.

    Corporate proxies usually ship their root through ``SSL_CERT_FILE``,
    ``REQUESTS_CA_BUNDLE`` or ``SSL_CERT_DIR``; those are loaded on top of the
    system certificates.
    """
    context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    cafile = next(filter(None, map(_env_path, CA_BUNDLE_ENV_VARS)), None)
    capath = _env_path("SSL_CERT_DIR")
    if cafile or capath:
        context.load_verify_locations(cafile=cafile, capath=capath)
    return context


def get_httpx_client_kwargs(timeout: float) -> dict[str, Any]:
    """Keyword arguments shared by every ``httpx.AsyncClient`` the SDK creates."""
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": False,
    }
