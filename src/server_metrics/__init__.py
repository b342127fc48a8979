"""
server_metrics – per-target query execution metrics for Prometheus.

Import path convention::

    from server_metrics.observability.metrics import ServerMetrics
    from server_metrics.config.settings import EnvSettingsLoader, MetricsSettings
    from server_metrics.kernel.errors import BaseError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
