"""Observability – logging and query execution metrics."""

from server_metrics.observability.logging import JsonLoggerFactory, get_logger
from server_metrics.observability.metrics import NoopQueryMetrics, QueryMetrics, ServerMetrics

__all__ = [
    "JsonLoggerFactory",
    "NoopQueryMetrics",
    "QueryMetrics",
    "ServerMetrics",
    "get_logger",
]
