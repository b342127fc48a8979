"""Observability – ServerMetrics, the per-target query execution recorder.

One :class:`ServerMetrics` instruments one target (e.g. one database). It
exports two families, both labelled with the target's constant labels plus
the name of the monitoring query:

* ``<ns>_<sub>_metric_query_last_duration_seconds`` (gauge) – duration of
  the last execution of every query;
* ``<ns>_<sub>_metric_query_errors_total`` (counter) – failed executions of
  every query since the recorder was created.

The recorder is a ``prometheus_client`` collector; registering it is left to
the caller::

    metrics = ServerMetrics("db1", {"env": "prod"})
    registry.register(metrics)

    with metrics.track("pg_stat_database"):
        rows = conn.execute(query)
"""
from __future__ import annotations

import threading
import types
from typing import Iterable, Iterator, Mapping

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from server_metrics.config.settings import MetricsSettings
from server_metrics.config.validation import ConstructionError
from server_metrics.observability.metrics.naming import (
    build_metric_name,
    validate_label_name,
    validate_metric_name,
)
from server_metrics.observability.metrics.ports import Duration, QueryMetrics, duration_to_seconds

DURATION_NAME = "metric_query_last_duration_seconds"
DURATION_HELP = "Duration of the last metric query"
ERRORS_NAME = "metric_query_errors_total"
ERRORS_HELP = "Number of metric query execution errors"


class ServerMetrics(QueryMetrics, Collector):
    """Last-duration gauge and error counter for every query run against a target.

    Args:
        target_name: Identifies the target; stored under
            ``settings.target_label``, which overrides any entry of the same
            name in *const_labels*.
        const_labels: Extra labels applied to every sample. Copied, so later
            changes to the caller's mapping are not seen.
        settings: Metric naming; defaults to :class:`MetricsSettings`.

    Raises:
        ConstructionError: a metric or label name is invalid, or a constant
            label shadows the query label.
    """

    def __init__(
        self,
        target_name: str,
        const_labels: Mapping[str, str] | None = None,
        *,
        settings: MetricsSettings | None = None,
    ) -> None:
        s = settings or MetricsSettings()

        self.duration_metric_name = validate_metric_name(
            build_metric_name(s.namespace, s.subsystem, DURATION_NAME)
        )
        self.errors_metric_name = validate_metric_name(
            build_metric_name(s.namespace, s.subsystem, ERRORS_NAME)
        )

        labels = {str(k): str(v) for k, v in (const_labels or {}).items()}
        labels[s.target_label] = str(target_name)
        for name in (*labels, s.query_label):
            validate_label_name(name, metric_name=self.duration_metric_name)
        if s.query_label in labels:
            raise ConstructionError(
                f"Constant label {s.query_label!r} collides with the query label",
                metric_name=self.duration_metric_name,
                label_name=s.query_label,
            )

        self._target_name = labels[s.target_label]
        self._const_labels: Mapping[str, str] = types.MappingProxyType(labels)
        self._label_names = [*sorted(labels), s.query_label]
        self._const_values = [labels[name] for name in sorted(labels)]

        self._durations: dict[str, float] = {}
        self._durations_lock = threading.Lock()
        self._errors: dict[str, int] = {}
        self._errors_lock = threading.Lock()

    @property
    def const_labels(self) -> Mapping[str, str]:
        """Read-only constant labels, target label included."""
        return self._const_labels

    @property
    def target_name(self) -> str:
        return self._target_name

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_query_execution(
        self,
        query_name: str,
        duration: Duration,
        error: object | None = None,
    ) -> None:
        seconds = duration_to_seconds(duration)
        with self._durations_lock:
            self._durations[query_name] = seconds

        with self._errors_lock:
            if error is not None:
                self._errors[query_name] = self._errors.get(query_name, 0) + 1
            else:
                # initialised so the series is exported before the first failure
                self._errors.setdefault(query_name, 0)

    def last_duration(self, query_name: str) -> float | None:
        with self._durations_lock:
            return self._durations.get(query_name)

    def error_count(self, query_name: str) -> int | None:
        with self._errors_lock:
            return self._errors.get(query_name)

    # ------------------------------------------------------------------
    # Collector protocol
    # ------------------------------------------------------------------

    def describe(self) -> Iterable[Metric]:
        return [self._duration_family(), self._errors_family()]

    def collect(self) -> Iterator[Metric]:
        with self._durations_lock:
            durations = sorted(self._durations.items())
        gauge = self._duration_family()
        for query_name, seconds in durations:
            gauge.add_metric([*self._const_values, query_name], seconds)
        yield gauge

        with self._errors_lock:
            errors = sorted(self._errors.items())
        counter = self._errors_family()
        for query_name, count in errors:
            counter.add_metric([*self._const_values, query_name], count)
        yield counter

    def _duration_family(self) -> GaugeMetricFamily:
        return GaugeMetricFamily(self.duration_metric_name, DURATION_HELP, labels=self._label_names)

    def _errors_family(self) -> CounterMetricFamily:
        return CounterMetricFamily(self.errors_metric_name, ERRORS_HELP, labels=self._label_names)

    def __repr__(self) -> str:
        return f"ServerMetrics(target={self.target_name!r}, const_labels={dict(self._const_labels)!r})"


__all__ = ["ServerMetrics"]
