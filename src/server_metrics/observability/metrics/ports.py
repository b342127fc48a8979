"""Observability – QueryMetrics port."""
from __future__ import annotations

import abc
import contextlib
import datetime
import time
from typing import Iterator

Duration = datetime.timedelta | float


def duration_to_seconds(duration: Duration) -> float:
    """Return *duration* as fractional seconds."""
    if isinstance(duration, datetime.timedelta):
        return duration.total_seconds()
    return float(duration)


class QueryMetrics(abc.ABC):
    """Port: records the outcome of every monitoring query execution."""

    @abc.abstractmethod
    def record_query_execution(
        self,
        query_name: str,
        duration: Duration,
        error: object | None = None,
    ) -> None:
        """Record one execution of *query_name*.

        *error* is the failure of that execution, or ``None`` when it
        succeeded. Only its presence matters.
        """

    @contextlib.contextmanager
    def track(self, query_name: str) -> Iterator[None]:
        """Time the wrapped block and record it as one execution of *query_name*.

        Anything raised by the block is recorded as the error and then
        re-raised unchanged. That includes ``BaseException`` subclasses such
        as ``asyncio.CancelledError`` and ``KeyboardInterrupt``: an execution
        that did not run to completion counts as failed.
        """
        start = time.perf_counter()
        try:
            yield
        except BaseException as exc:
            self.record_query_execution(query_name, time.perf_counter() - start, exc)
            raise
        self.record_query_execution(query_name, time.perf_counter() - start)


__all__ = ["Duration", "QueryMetrics", "duration_to_seconds"]
