"""Testing fakes – in-memory doubles for observability ports."""
from server_metrics.testing.fakes.metrics import FakeQueryMetrics, RecordedExecution

__all__ = ["FakeQueryMetrics", "RecordedExecution"]
