import logging

import pytest
import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from conftest import make_response
from core.logging import PayPalEvents, configure_logging, get_log_level, get_log_renderer


class _TestLogger:
    def __init__(self):
        self.output = []

    def __call__(self, logger, method_name, event_dict):
        """Process log events and store them for test assertions"""
        self.output.append(event_dict.copy())
        return event_dict


@pytest.fixture
def captured_logs():
    test_logger = _TestLogger()

    structlog.reset_defaults()
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            test_logger,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,  # Don't cache to ensure fresh config
    )
    yield test_logger
    structlog.reset_defaults()


def test_request_completed_event(captured_logs, plans, mock_session):
    mock_session.queue(
        make_response(200, {"id": "P-1"}, headers={"PayPal-Debug-Id": "dbg-1"})
    )

    plans.get_plan("P-1")

    events = [
        log for log in captured_logs.output if log.get("event") == PayPalEvents.REQUEST_COMPLETED
    ]
    assert len(events) == 1
    entry = events[0]
    assert entry["method"] == "GET"
    assert entry["url"].endswith("/v1/payments/billing-plans/P-1")
    assert entry["status"] == 200
    assert entry["debug_id"] == "dbg-1"
    assert entry["level"] == "debug"
    assert "duration_ms" in entry
    assert "timestamp" in entry


def test_agreement_executed_event(captured_logs, agreements, mock_session):
    mock_session.queue(make_response(200, {"id": "I-ABC123", "state": "Active"}))

    agreements.execute_agreement("EC-TOKEN")

    executed = [
        log for log in captured_logs.output if log.get("event") == PayPalEvents.AGREEMENT_EXECUTED
    ]
    assert executed[0]["agreement_id"] == "I-ABC123"
    assert executed[0]["level"] == "info"
    assert executed[0]["logger"] == "billing.agreements"


def test_token_replacement_logs_no_secret(captured_logs, paypal_client):
    paypal_client.set_access_token("super-secret-token")

    replaced = [
        log for log in captured_logs.output if log.get("event") == PayPalEvents.TOKEN_REPLACED
    ]
    assert replaced[0]["client_id"] == "test_client_id"
    assert "super-secret-token" not in str(replaced[0])


def test_log_level_and_renderer(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert get_log_level() == "DEBUG"
    assert isinstance(get_log_renderer(), structlog.processors.JSONRenderer)

    monkeypatch.setenv("ENVIRONMENT", "development")
    assert isinstance(get_log_renderer(), structlog.dev.ConsoleRenderer)


def test_configure_logging(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    try:
        configure_logging()

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        LoggingInstrumentor().uninstrument()
        root_logger.handlers = original_handlers
        root_logger.setLevel(original_level)
        structlog.reset_defaults()


def test_log_settings_take_precedence(monkeypatch, mock_settings):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ENVIRONMENT", "development")
    settings = mock_settings.model_copy(
        update={"LOG_LEVEL": "debug", "ENVIRONMENT": "production"}
    )

    assert get_log_level(settings) == "DEBUG"
    assert isinstance(get_log_renderer(settings), structlog.processors.JSONRenderer)
