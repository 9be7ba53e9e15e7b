import base64
from enum import Enum

import requests

from paypal.credentials import Credentials


class AuthMode(str, Enum):
    BASIC = "basic"
    BEARER = "bearer"
    BOTH = "both"


# Which scheme each endpoint is sent with. PayPal's endpoints disagree on
# what they honor, so this stays an explicit table instead of one rule.
ENDPOINT_AUTH: dict[str, AuthMode] = {
    "create_plan": AuthMode.BEARER,
    "activate_plan": AuthMode.BOTH,
    "get_plan": AuthMode.BEARER,
    "list_plans": AuthMode.BEARER,
    "create_agreement": AuthMode.BEARER,
    "execute_agreement": AuthMode.BOTH,
    "get_agreement": AuthMode.BEARER,
    "suspend_agreement": AuthMode.BEARER,
    "reactivate_agreement": AuthMode.BEARER,
    "cancel_agreement": AuthMode.BEARER,
    "list_agreement_transactions": AuthMode.BEARER,
}


def basic_header(credentials: Credentials) -> str:
    raw = f"{credentials.client_id}:{credentials.secret}"
    return "Basic " + base64.b64encode(raw.encode()).decode()


def bearer_header(credentials: Credentials) -> str:
    return f"Bearer {credentials.access_token}"


def attach_auth(
    request: requests.PreparedRequest, credentials: Credentials, mode: AuthMode
) -> requests.PreparedRequest:
    """Set the Authorization header on ``request`` in place."""
    if mode in (AuthMode.BASIC, AuthMode.BOTH):
        request.headers["Authorization"] = basic_header(credentials)
    # BOTH applies basic first, then bearer; the bearer value is what is sent.
    # Without a token no bearer header is set.
    if mode in (AuthMode.BEARER, AuthMode.BOTH) and credentials.access_token:
        request.headers["Authorization"] = bearer_header(credentials)
    return request
