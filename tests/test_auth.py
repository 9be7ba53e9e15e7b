import base64

import pytest

from paypal.auth import ENDPOINT_AUTH, AuthMode, attach_auth
from paypal.builder import build_request
from paypal.credentials import Credentials

CREDENTIALS = Credentials(client_id="client", secret="s3cret", access_token="tok-123")


@pytest.fixture
def request_():
    return build_request("GET", "https://api.sandbox.paypal.com/v1/payments/billing-plans")


def test_basic_auth(request_):
    attach_auth(request_, CREDENTIALS, AuthMode.BASIC)

    expected = base64.b64encode(b"client:s3cret").decode()
    assert request_.headers["Authorization"] == f"Basic {expected}"


def test_bearer_auth(request_):
    attach_auth(request_, CREDENTIALS, AuthMode.BEARER)

    assert request_.headers["Authorization"] == "Bearer tok-123"


def test_both_applies_bearer_last(request_):
    attach_auth(request_, CREDENTIALS, AuthMode.BOTH)

    assert request_.headers["Authorization"] == "Bearer tok-123"


def test_endpoint_auth_table():
    assert ENDPOINT_AUTH["activate_plan"] is AuthMode.BOTH
    assert ENDPOINT_AUTH["execute_agreement"] is AuthMode.BOTH
    both = {name for name, mode in ENDPOINT_AUTH.items() if mode is AuthMode.BOTH}
    assert both == {"activate_plan", "execute_agreement"}
    assert ENDPOINT_AUTH["create_plan"] is AuthMode.BEARER
    assert ENDPOINT_AUTH["get_agreement"] is AuthMode.BEARER


def test_bearer_without_token_sets_no_header(request_):
    credentials = Credentials(client_id="client", secret="s3cret")

    attach_auth(request_, credentials, AuthMode.BEARER)

    assert "Authorization" not in request_.headers


def test_both_without_token_keeps_basic(request_):
    credentials = Credentials(client_id="client", secret="s3cret", access_token="")

    attach_auth(request_, credentials, AuthMode.BOTH)

    assert request_.headers["Authorization"].startswith("Basic ")
