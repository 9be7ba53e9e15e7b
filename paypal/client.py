from datetime import datetime
from typing import Any, Optional
from urllib.parse import quote

import requests

from core.settings import API_BASE_SANDBOX, PayPalSettings
from paypal.auth import AuthMode, attach_auth
from paypal.builder import build_request
from paypal.credentials import (
    Credentials,
    RefreshableTokenProvider,
    TokenProvider,
)
from paypal.sender import DEFAULT_TIMEOUT, send


def path_segment(value: str) -> str:
    """Percent-encode a caller-supplied value for use as one path segment."""
    return quote(str(value), safe="")


class PayPalClient:
    """
    Transport client for the PayPal REST API.

    Holds the API base, a token provider and an HTTP session. Endpoint
    wrappers build requests with ``new_request`` and hand them to
    ``send_with_auth``.
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        api_base: str = API_BASE_SANDBOX,
        access_token: str = "",
        token_expires_at: Optional[datetime] = None,
        token_provider: Optional[TokenProvider] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not client_id or not secret or not api_base:
            raise ValueError(
                "client_id, secret and api_base are required to create a PayPalClient"
            )
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.token_provider = token_provider or RefreshableTokenProvider(
            Credentials(
                client_id=client_id,
                secret=secret,
                access_token=access_token,
                expires_at=token_expires_at,
            )
        )
        self._owns_session = session is None
        self._session = session or requests.Session()

    @classmethod
    def from_settings(
        cls, settings: PayPalSettings, session: Optional[requests.Session] = None
    ) -> "PayPalClient":
        return cls(
            client_id=settings.PAYPAL_CLIENT_ID,
            secret=settings.PAYPAL_SECRET,
            api_base=settings.PAYPAL_API_BASE,
            access_token=settings.PAYPAL_ACCESS_TOKEN,
            token_expires_at=settings.PAYPAL_TOKEN_EXPIRES_AT,
            session=session,
            timeout=settings.PAYPAL_TIMEOUT,
        )

    @property
    def credentials(self) -> Credentials:
        return self.token_provider.current()

    def set_access_token(
        self, access_token: str, expires_at: Optional[datetime] = None
    ) -> Credentials:
        """Swap in a token obtained elsewhere."""
        if not isinstance(self.token_provider, RefreshableTokenProvider):
            raise TypeError("token provider does not accept new tokens")
        return self.token_provider.replace_token(access_token, expires_at)

    def url(self, path: str) -> str:
        return f"{self.api_base}{path}"

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[dict] = None,
    ) -> requests.PreparedRequest:
        return build_request(method, self.url(path), body, params)

    def send_with_auth(
        self,
        request: requests.PreparedRequest,
        into: Optional[Any] = None,
        mode: AuthMode = AuthMode.BEARER,
    ) -> Any:
        # Credentials are read once per call
        attach_auth(request, self.token_provider.current(), mode)
        return send(self._session, request, into=into, timeout=self.timeout)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "PayPalClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
