"""
Prometheus metrics for PayPal API exchanges.

The collectors live in the default registry; applications expose them
however they already expose Prometheus metrics.
"""

from prometheus_client import Counter, Histogram

requests_total = Counter(
    "paypal_requests_total",
    "Total number of PayPal API requests",
    ["method", "outcome"],  # outcome: HTTP status code or "transport_error"
)

request_latency = Histogram(
    "paypal_request_latency_seconds",
    "Time taken for a PayPal API request to complete",
    ["method"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def observe_request(method: str, outcome: str, duration: float) -> None:
    """Record one finished exchange."""
    requests_total.labels(method=method, outcome=outcome).inc()
    request_latency.labels(method=method).observe(duration)
