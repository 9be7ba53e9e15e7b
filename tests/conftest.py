"""Test configuration and fixtures."""

import json
import os
from typing import Any, Optional

import pytest
import requests

from billing.agreements import BillingAgreementService
from billing.plans import BillingPlanService
from core.settings import PayPalSettings
from paypal.client import PayPalClient

API_BASE = "https://api.sandbox.paypal.com"


def make_response(
    status_code: int,
    body: Any = None,
    headers: Optional[dict] = None,
) -> requests.Response:
    """Build a real requests.Response; dict/list bodies are JSON-encoded."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.headers.update(headers or {})
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp.headers.setdefault("Content-Type", "application/json")
        resp._content = json.dumps(body).encode("utf-8")
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = str(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class MockPayPalSession(requests.Session):
    """Session that records every prepared request and replays queued outcomes.

    Queue ``requests.Response`` objects to answer in order, or exceptions to
    raise from ``send`` (e.g. ``requests.ConnectionError``).
    """

    def __init__(self, *outcomes) -> None:
        super().__init__()
        self._outcomes = list(outcomes)
        self.sent: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict] = []

    def queue(self, *outcomes) -> None:
        self._outcomes.extend(outcomes)

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if not self._outcomes:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        outcome.request = request
        outcome.url = request.url
        return outcome

    @property
    def last(self) -> requests.PreparedRequest:
        return self.sent[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.body)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "PAYPAL_CLIENT_ID": "test_client_id",
            "PAYPAL_SECRET": "test_secret",
            "PAYPAL_ACCESS_TOKEN": "test_access_token",
            "PAYPAL_API_BASE": API_BASE,
            "ENVIRONMENT": "test",
            "DISABLE_TRACING": "true",
        }
    )

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_settings():
    return PayPalSettings(
        PAYPAL_CLIENT_ID="test_client_id",
        PAYPAL_SECRET="test_secret",
        PAYPAL_ACCESS_TOKEN="test_access_token",
        PAYPAL_API_BASE=API_BASE,
        PAYPAL_TIMEOUT=5,
        ENVIRONMENT="test",
    )


@pytest.fixture
def mock_session():
    return MockPayPalSession()


@pytest.fixture
def paypal_client(mock_settings, mock_session):
    client = PayPalClient.from_settings(mock_settings, session=mock_session)
    yield client
    client.close()


@pytest.fixture
def plans(paypal_client):
    return BillingPlanService(paypal_client)


@pytest.fixture
def agreements(paypal_client):
    return BillingAgreementService(paypal_client)
