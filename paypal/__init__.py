from paypal.auth import ENDPOINT_AUTH, AuthMode, attach_auth
from paypal.builder import build_request
from paypal.client import PayPalClient
from paypal.credentials import (
    Credentials,
    RefreshableTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from paypal.errors import (
    AgreementExecutionError,
    APIError,
    ErrorDetail,
    HTTPStatusError,
    PayPalError,
    RequestConstructionError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)
from paypal.results import (
    ApiFailure,
    BusinessFailure,
    DecodeFailure,
    HTTPFailure,
    InvalidRequest,
    Ok,
    Outcome,
    TransportFailure,
    attempt,
)
from paypal.sender import send

__all__ = [
    "ENDPOINT_AUTH",
    "AuthMode",
    "attach_auth",
    "build_request",
    "PayPalClient",
    "Credentials",
    "RefreshableTokenProvider",
    "StaticTokenProvider",
    "TokenProvider",
    "AgreementExecutionError",
    "APIError",
    "ErrorDetail",
    "HTTPStatusError",
    "PayPalError",
    "RequestConstructionError",
    "ResponseDecodeError",
    "SerializationError",
    "TransportError",
    "ApiFailure",
    "BusinessFailure",
    "DecodeFailure",
    "HTTPFailure",
    "InvalidRequest",
    "Ok",
    "Outcome",
    "TransportFailure",
    "attempt",
    "send",
]
