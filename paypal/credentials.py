"""
Credentials and token providers.

The pipeline reads credentials once per call from a provider; it never
fetches or refreshes an OAuth token by itself.
"""

import threading
from datetime import UTC, datetime
from typing import Optional, Protocol

import structlog
from pydantic import BaseModel, ConfigDict

from core.logging import PayPalEvents

log = structlog.get_logger(__name__)


class Credentials(BaseModel):
    """Immutable snapshot of client credentials and the current bearer token."""

    client_id: str
    secret: str
    access_token: str = ""
    expires_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    @property
    def expired(self) -> bool:
        if self.expires_at is None:
            return False
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= datetime.now(UTC)

    def with_token(
        self, access_token: str, expires_at: Optional[datetime] = None
    ) -> "Credentials":
        return self.model_copy(
            update={"access_token": access_token, "expires_at": expires_at}
        )


class TokenProvider(Protocol):
    def current(self) -> Credentials: ...


class StaticTokenProvider:
    """Always hands out the same credentials."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    def current(self) -> Credentials:
        return self._credentials


class RefreshableTokenProvider:
    """Credentials whose token the caller may replace from any thread."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials
        self._lock = threading.Lock()

    def current(self) -> Credentials:
        with self._lock:
            return self._credentials

    def replace_token(
        self, access_token: str, expires_at: Optional[datetime] = None
    ) -> Credentials:
        with self._lock:
            self._credentials = self._credentials.with_token(access_token, expires_at)
            log.debug(
                PayPalEvents.TOKEN_REPLACED,
                client_id=self._credentials.client_id,
                expires_at=expires_at.isoformat() if expires_at else None,
            )
            return self._credentials
