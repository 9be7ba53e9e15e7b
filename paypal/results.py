"""
Tagged outcomes for PayPal calls.

``attempt`` runs a call and turns the pipeline's exceptions into variants,
so callers can ``match`` on the result instead of catching::

    match attempt(agreements.execute_agreement, token):
        case Ok(value=agreement): ...
        case ApiFailure(error=err): ...
        case TransportFailure(): ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from paypal.errors import (
    AgreementExecutionError,
    APIError,
    HTTPStatusError,
    RequestConstructionError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class ApiFailure:
    error: APIError

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


@dataclass(frozen=True)
class HTTPFailure:
    error: HTTPStatusError

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def raw_body(self) -> str:
        return self.error.raw_body


@dataclass(frozen=True)
class TransportFailure:
    error: TransportError

    @property
    def cause(self) -> BaseException | None:
        return self.error.cause


@dataclass(frozen=True)
class DecodeFailure:
    error: ResponseDecodeError

    @property
    def raw_body(self) -> str:
        return self.error.raw_body


@dataclass(frozen=True)
class InvalidRequest:
    error: RequestConstructionError | SerializationError


@dataclass(frozen=True)
class BusinessFailure:
    error: AgreementExecutionError


Outcome = Union[
    Ok[T],
    ApiFailure,
    HTTPFailure,
    TransportFailure,
    DecodeFailure,
    InvalidRequest,
    BusinessFailure,
]


def attempt(call: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Run ``call`` and return its outcome instead of raising."""
    try:
        return Ok(call(*args, **kwargs))
    # APIError subclasses HTTPStatusError, so it is matched first
    except APIError as exc:
        return ApiFailure(exc)
    except HTTPStatusError as exc:
        return HTTPFailure(exc)
    except TransportError as exc:
        return TransportFailure(exc)
    except ResponseDecodeError as exc:
        return DecodeFailure(exc)
    except (RequestConstructionError, SerializationError) as exc:
        return InvalidRequest(exc)
    except AgreementExecutionError as exc:
        return BusinessFailure(exc)
