"""Observability – query execution metrics."""
from server_metrics.observability.metrics.ports import Duration, QueryMetrics, duration_to_seconds
from server_metrics.observability.metrics.noop import NoopQueryMetrics
from server_metrics.observability.metrics.recorder import ServerMetrics

__all__ = ["Duration", "NoopQueryMetrics", "QueryMetrics", "ServerMetrics", "duration_to_seconds"]
