"""
PayPal client exceptions.

Every failure of the request pipeline is raised as a subclass of
``PayPalError``; nothing is retried or swallowed on the way out.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ErrorDetail(BaseModel):
    """One entry of the ``details`` array in a PayPal error body."""

    field: Optional[str] = None
    issue: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class ErrorBody(BaseModel):
    """PayPal error payload (REST shape and OAuth shape)."""

    name: Optional[str] = None
    message: Optional[str] = None
    debug_id: Optional[str] = None
    information_link: Optional[str] = None
    details: list[ErrorDetail] = []

    # /v1/oauth2 style errors
    error: Optional[str] = None
    error_description: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("details", mode="before")
    @classmethod
    def _null_details(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def code(self) -> Optional[str]:
        return self.name or self.error

    @property
    def text(self) -> str:
        return self.message or self.error_description or ""


class PayPalError(Exception):
    """Base exception for all PayPal client errors"""

    pass


class RequestConstructionError(PayPalError):
    """Raised when a request cannot be built (bad method or URL)"""

    pass


class SerializationError(PayPalError):
    """Raised when a request body cannot be encoded as JSON"""

    pass


class TransportError(PayPalError):
    """Raised on network-level failures (refused, DNS, timeout)"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class HTTPStatusError(PayPalError):
    """Raised for a non-2xx response whose body is not a PayPal error"""

    def __init__(
        self,
        status: int,
        raw_body: str,
        debug_id: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message or f"PayPal API returned HTTP {status}")
        self.status = status
        self.raw_body = raw_body
        self.debug_id = debug_id


class APIError(HTTPStatusError):
    """Raised for a non-2xx response carrying a PayPal error body"""

    def __init__(
        self,
        status: int,
        code: str,
        message: str,
        raw_body: str = "",
        details: Optional[list[ErrorDetail]] = None,
        debug_id: Optional[str] = None,
        information_link: Optional[str] = None,
    ):
        super().__init__(
            status,
            raw_body,
            debug_id=debug_id,
            message=f"{status} {code}: {message}",
        )
        self.code = code
        self.message = message
        self.details = details or []
        self.information_link = information_link


class ResponseDecodeError(PayPalError):
    """Raised when a 2xx response body cannot be decoded"""

    def __init__(self, message: str, raw_body: str):
        super().__init__(message)
        self.raw_body = raw_body


class AgreementExecutionError(PayPalError):
    """Raised when executing an agreement returns no agreement ID"""

    def __init__(self, token: str, response: Any = None):
        super().__init__(f"Unable to execute agreement with token={token}")
        self.token = token
        self.response = response
