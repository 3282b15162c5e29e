"""Discriminated result of a terminal request.

Terminal verbs return ``Success`` or ``Failure`` instead of raising. Only
``Success`` has a ``data`` attribute, so a type checker rejects
``outcome.data`` until the caller has narrowed on ``outcome.ok``.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, NoReturn, Optional, TypeVar, Union

from pydantic import ValidationError

from ..models.errors import GraphNodeHttpError
from ..models.problem import ProblemDetails

T = TypeVar("T")


@dataclass(frozen=True)
class HttpError:
    """Failure details.

    ``status_code`` is ``0`` when no usable HTTP response was obtained
    (connection errors, timeouts, undecodable payloads).
    """

    status_code: int
    message: str
    body: Any = None

    @property
    def is_network_error(self) -> bool:
        return self.status_code == 0

    @property
    def problem(self) -> Optional[ProblemDetails]:
        """The body parsed as problem details, when it has that shape."""
        if not isinstance(self.body, dict):
            return None
        try:
            return ProblemDetails.model_validate(self.body)
        except ValidationError:
            return None


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    status_code: int
    ok: Literal[True] = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Failure:
    error: HttpError
    ok: Literal[False] = field(default=False, init=False)

    @property
    def is_unauthorized(self) -> bool:
        return self.error.status_code == 401

    def unwrap(self) -> NoReturn:
        raise GraphNodeHttpError(
            self.error.status_code, self.error.message, self.error.body
        )


Outcome = Union[Success[T], Failure]


def is_unauthorized(outcome: "Outcome[Any]") -> bool:
    return not outcome.ok and outcome.is_unauthorized
