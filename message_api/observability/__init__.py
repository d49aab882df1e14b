"""Observability package for the Messages API."""

from message_api.observability.metrics import (
    observe_request_latency,
    increment_message_operation,
    get_metrics_content,
    MessageOperation,
)

__all__ = [
    "observe_request_latency",
    "increment_message_operation",
    "get_metrics_content",
    "MessageOperation",
]
