import logging
import os
import sys
from typing import Optional

import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from core.settings import PayPalSettings


def _environment(settings: Optional[PayPalSettings]) -> str:
    if settings is not None:
        return settings.ENVIRONMENT
    return os.getenv("ENVIRONMENT", "development")


def get_log_level(settings: Optional[PayPalSettings] = None):
    """Get log level from settings or the environment, defaulting to INFO"""
    if settings is not None:
        return settings.LOG_LEVEL.upper()
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_renderer(settings: Optional[PayPalSettings] = None):
    """Get log renderer based on environment"""
    env = _environment(settings)
    # JSON for tests and production
    if env in ["test", "production"]:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def configure_logging(settings: Optional[PayPalSettings] = None):
    """Set up structlog + OTEL context injection.

    The library never calls this on import; applications opt in. Without
    ``settings`` the LOG_LEVEL and ENVIRONMENT variables are read directly.
    """
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.ExceptionPrettyPrinter(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            get_log_renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if _environment(settings) == "test":
        # In test mode, write to stdout for easier capture
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(get_log_level(settings))

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    # Initialize OpenTelemetry logging instrumentation AFTER configuring logging
    LoggingInstrumentor().instrument(set_logging_format=False)


class PayPalEvents:
    """Standard names for PayPal client log events"""

    REQUEST_COMPLETED = "paypal.request.completed"
    PLAN_CREATED = "paypal.plan.created"
    PLAN_ACTIVATED = "paypal.plan.activated"
    AGREEMENT_CREATED = "paypal.agreement.created"
    AGREEMENT_EXECUTED = "paypal.agreement.executed"
    AGREEMENT_STATE_CHANGED = "paypal.agreement.state_changed"
    TOKEN_REPLACED = "paypal.token.replaced"
