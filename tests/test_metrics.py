"""Test the metrics module."""

import requests
from prometheus_client import REGISTRY

from conftest import MockPayPalSession, make_response
from core.metrics import observe_request
from paypal.builder import build_request
from paypal.errors import HTTPStatusError, TransportError
from paypal.sender import send

URL = "https://api.sandbox.paypal.com/v1/payments/billing-plans"


def _count(method: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "paypal_requests_total", {"method": method, "outcome": outcome}
    )
    return value or 0.0


def _latency_count(method: str) -> float:
    value = REGISTRY.get_sample_value(
        "paypal_request_latency_seconds_count", {"method": method}
    )
    return value or 0.0


def test_observe_request_updates_counter_and_histogram():
    before = _count("PUT", "200")
    before_latency = _latency_count("PUT")

    observe_request("PUT", "200", 0.2)

    assert _count("PUT", "200") == before + 1
    assert _latency_count("PUT") == before_latency + 1


def test_send_counts_status_codes():
    before_ok = _count("GET", "200")
    before_err = _count("GET", "500")
    session = MockPayPalSession(make_response(200, None), make_response(500, "boom"))

    send(session, build_request("GET", URL))
    try:
        send(session, build_request("GET", URL))
    except HTTPStatusError:
        pass

    assert _count("GET", "200") == before_ok + 1
    assert _count("GET", "500") == before_err + 1


def test_send_counts_transport_errors():
    before = _count("POST", "transport_error")
    session = MockPayPalSession(requests.ConnectionError("refused"))

    try:
        send(session, build_request("POST", URL, {"name": "x"}))
    except TransportError:
        pass

    assert _count("POST", "transport_error") == before + 1
