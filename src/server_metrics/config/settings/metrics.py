"""Config settings – MetricsSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from server_metrics.config.settings.base import Settings
from server_metrics.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class MetricsSettings(Settings):
    """Naming of the metric families a :class:`ServerMetrics` exports.

    Read from ``SERVER_METRICS_*`` environment variables by
    :class:`~server_metrics.config.settings.EnvSettingsLoader`.
    An empty ``namespace`` or ``subsystem`` is left out of the metric names;
    the two label names must be set and distinct.
    """

    _prefix: ClassVar[str] = "SERVER_METRICS"

    namespace: str = "pg"
    subsystem: str = "exporter"
    target_label: str = "datname"
    query_label: str = "query"

    def _validate(self) -> None:
        for name in ("target_label", "query_label"):
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")
        if self.target_label == self.query_label:
            raise InvalidSettingValueError(
                "query_label",
                self.query_label,
                "must differ from target_label",
            )


__all__ = ["MetricsSettings"]
