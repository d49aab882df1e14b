"""
Prometheus Metrics for the Messages API.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py
    ─────────                  ────────────────────────────
    Define metrics ──────────► /metrics endpoint ──────────► Prometheus scraper

METRIC TYPES:
    - Counter: Value only goes up (e.g., message operations by outcome)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

MESSAGE_OPERATIONS_TOTAL = Counter(
    "messages_operations_total",
    "Total number of message operations by outcome",
    ["operation", "outcome"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MessageOperation:
    """Operation labels for messages_operations_total metric."""

    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_message_operation(operation: str, outcome: str):
    """
    Call once per handled message request.

    Args:
        operation: One of MessageOperation
        outcome: Result variant name (Created, NotFound, Conflict, ...)
    """
    MESSAGE_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_message_operation",
    "get_metrics_content",
    "MessageOperation",
]
