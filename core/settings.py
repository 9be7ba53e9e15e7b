from datetime import datetime
from typing import Literal

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load .env file automatically
load_dotenv()

API_BASE_SANDBOX = "https://api.sandbox.paypal.com"
API_BASE_LIVE = "https://api.paypal.com"


class PayPalSettings(BaseSettings):
    """PayPal client settings loaded from environment variables."""

    # Endpoint
    PAYPAL_API_BASE: str = API_BASE_SANDBOX
    PAYPAL_TIMEOUT: float = 30.0

    # Credentials
    PAYPAL_CLIENT_ID: str
    PAYPAL_SECRET: str

    # Pre-obtained OAuth bearer token
    PAYPAL_ACCESS_TOKEN: str = ""
    PAYPAL_TOKEN_EXPIRES_AT: datetime | None = None

    # Logging / observability
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    DISABLE_TRACING: bool = False

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def is_live(self) -> bool:
        return self.PAYPAL_API_BASE.rstrip("/") == API_BASE_LIVE
