import os
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from core.settings import PayPalSettings

log = structlog.get_logger(__name__)

TRACER_NAME = "paypal-billing"


def get_tracer() -> trace.Tracer:
    """Tracer used around every PayPal exchange (no-op until a provider is set)."""
    return trace.get_tracer(TRACER_NAME)


def init_tracer(
    app_name: str = "paypal-billing", settings: Optional[PayPalSettings] = None
) -> TracerProvider:
    """Initialize OpenTelemetry tracer with OTLP exporter"""
    provider = TracerProvider(resource=Resource.create({"service.name": app_name}))

    # DISABLE_TRACING keeps spans local (useful in tests)
    if settings is not None:
        disabled = settings.DISABLE_TRACING
    else:
        disabled = os.getenv("DISABLE_TRACING", "").lower() in {"1", "true", "yes"}
    if disabled:
        exporter = ConsoleSpanExporter()
    else:
        try:
            exporter = OTLPSpanExporter()
        except Exception as exc:  # pragma: no cover – only hit when no collector
            log.warning("OTLP exporter unavailable, tracing disabled", error=str(exc))
            exporter = ConsoleSpanExporter()

    provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return provider
