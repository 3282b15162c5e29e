"""Bearer credential providers.

A credential is resolved on every dispatch, never cached by the request
builder, so a token rotated by the caller is picked up by the next request.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    """Anything able to produce the current bearer token, or ``None``."""

    def resolve(self) -> Optional[str]: ...


@dataclass(frozen=True)
class StaticCredential:
    """Provider that always returns the same token."""

    token: Optional[str]

    def resolve(self) -> Optional[str]:
        return self.token or None


@dataclass(frozen=True)
class CallableCredential:
    """Provider backed by a zero-argument accessor."""

    accessor: Callable[[], Optional[str]]

    def resolve(self) -> Optional[str]:
        return self.accessor() or None


class MutableCredential:
    """Token cell owned by a client and updated after login or refresh."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def set(self, token: Optional[str]) -> None:
        self._token = token

    def resolve(self) -> Optional[str]:
        return self._token or None


CredentialSource = Union[str, Callable[[], Optional[str]], CredentialProvider]


def as_credential_provider(
    source: Optional[CredentialSource],
) -> Optional[CredentialProvider]:
    """Normalize a literal token, an accessor or a provider into a provider.

    Args:
        source: A token string, a callable returning the current token, an
            object implementing ``resolve()``, or ``None``.

    Returns:
        The matching provider, or ``None`` when no credential is configured.
    """
    if source is None:
        return None
    if isinstance(source, str):
        return StaticCredential(source)
    if isinstance(source, CredentialProvider):
        return source
    if callable(source):
        return CallableCredential(source)
    raise TypeError(f"Unsupported credential source: {type(source).__name__}")
