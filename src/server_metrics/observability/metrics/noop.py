"""Observability – NoopQueryMetrics implementation."""
from __future__ import annotations

from server_metrics.observability.metrics.ports import Duration, QueryMetrics


class NoopQueryMetrics(QueryMetrics):
    """Silent no-op recorder.

    Use it for targets whose metrics are disabled, so the query loop can call
    :meth:`record_query_execution` and :meth:`~QueryMetrics.track`
    unconditionally. Nothing is stored and nothing is exported. ``track``
    still re-raises whatever the wrapped block raises.
    """

    def record_query_execution(
        self,
        query_name: str,
        duration: Duration,
        error: object | None = None,
    ) -> None:
        """Discard the execution."""


__all__ = ["NoopQueryMetrics"]
