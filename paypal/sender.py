"""
Send prepared requests and decode PayPal responses.

Success bodies are decoded into the caller's type, error bodies into
``APIError``; anything that does not fit surfaces as a typed error carrying
the raw body. Nothing is retried here.
"""

import json
import time
from typing import Any, Optional, get_origin

import requests
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.logging import PayPalEvents
from core.metrics import observe_request
from core.tracing import get_tracer
from paypal.errors import (
    APIError,
    ErrorBody,
    HTTPStatusError,
    ResponseDecodeError,
    TransportError,
)

log = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def decode_body(into: Any, raw: bytes) -> Any:
    """Decode a JSON body into a pydantic model class or any TypeAdapter type."""
    try:
        if isinstance(into, type) and not get_origin(into) and issubclass(into, BaseModel):
            return into.model_validate_json(raw)
        return TypeAdapter(into).validate_json(raw)
    except ValidationError as exc:
        text = raw.decode("utf-8", errors="replace")
        raise ResponseDecodeError(
            f"Cannot decode PayPal response: {exc.error_count()} error(s)", text
        ) from exc


def error_from_response(response: requests.Response) -> HTTPStatusError:
    """Map a non-2xx response to ``APIError`` or, failing that, ``HTTPStatusError``."""
    raw = response.text or ""
    debug_id = response.headers.get("PayPal-Debug-Id")
    try:
        payload = json.loads(raw)
        body = ErrorBody.model_validate(payload)
    except ValueError:
        # json.JSONDecodeError and pydantic.ValidationError both land here
        return HTTPStatusError(response.status_code, raw, debug_id=debug_id)

    if not body.code:
        return HTTPStatusError(response.status_code, raw, debug_id=debug_id)

    return APIError(
        response.status_code,
        body.code,
        body.text,
        raw_body=raw,
        details=body.details,
        debug_id=body.debug_id or debug_id,
        information_link=body.information_link,
    )


def send(
    session: requests.Session,
    request: requests.PreparedRequest,
    into: Optional[Any] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """
    Execute ``request`` and decode the result.

    Args:
        session: HTTP session used for the exchange
        request: Prepared, already authenticated request
        into: Type to decode a 2xx body into; ``None`` discards the body
        timeout: Seconds before the exchange is abandoned

    Returns:
        The decoded record, or ``None`` when ``into`` is ``None``
    """
    started = time.perf_counter()
    with get_tracer().start_as_current_span("paypal.request") as span:
        span.set_attribute("http.method", request.method)
        span.set_attribute("http.url", request.url)
        try:
            response = session.send(request, timeout=timeout)
        except requests.RequestException as exc:
            duration = time.perf_counter() - started
            observe_request(request.method, "transport_error", duration)
            span.set_attribute("error.type", type(exc).__name__)
            raise TransportError(
                f"{request.method} {request.url} failed: {exc}", cause=exc
            ) from exc

        duration = time.perf_counter() - started
        status = response.status_code
        span.set_attribute("http.status_code", status)
        observe_request(request.method, str(status), duration)
        log.debug(
            PayPalEvents.REQUEST_COMPLETED,
            method=request.method,
            url=request.url,
            status=status,
            duration_ms=round(duration * 1000, 1),
            debug_id=response.headers.get("PayPal-Debug-Id"),
        )

        if not 200 <= status < 300:
            raise error_from_response(response)

        if into is None:
            return None
        return decode_body(into, response.content)
