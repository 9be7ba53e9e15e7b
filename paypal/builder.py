import json
from typing import Any, Optional
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel

from paypal.errors import RequestConstructionError, SerializationError

ALLOWED_METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en_US",
}


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        # Unset optional fields never reach the wire
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


def encode_body(body: Any) -> bytes:
    """Serialize a request body to compact JSON bytes."""
    try:
        return json.dumps(
            _jsonable(body), separators=(",", ":"), allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode request body: {exc}") from exc


def build_request(
    method: str, url: str, body: Any = None, params: Optional[dict] = None
) -> requests.PreparedRequest:
    """
    Build a PayPal API request.

    Args:
        method: HTTP verb (GET, POST, PATCH, ...)
        url: Absolute URL, base and path already joined
        body: Optional record to send as JSON; ``None`` means no body
        params: Optional query parameters

    Returns:
        Prepared request without any authentication attached
    """
    verb = (method or "").upper()
    if verb not in ALLOWED_METHODS:
        raise RequestConstructionError(f"Unsupported HTTP method: {method!r}")

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise RequestConstructionError(f"Malformed URL: {url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise RequestConstructionError(f"Malformed URL: {url!r}")

    headers = dict(DEFAULT_HEADERS)
    data = None
    if body is not None:
        data = encode_body(body)
        headers["Content-Type"] = "application/json"

    try:
        return requests.Request(
            verb, url, headers=headers, data=data, params=params
        ).prepare()
    except (requests.RequestException, ValueError) as exc:
        raise RequestConstructionError(f"Malformed URL: {url!r}") from exc
