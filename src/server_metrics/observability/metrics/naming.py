"""Observability – metric and label name validation."""
from __future__ import annotations

import re

from server_metrics.config.validation import ConstructionError

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")
_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
_RESERVED_LABEL_PREFIX = "__"


def build_metric_name(namespace: str, subsystem: str, name: str) -> str:
    """Join the non-empty parts with ``_`` the way ``prometheus_client`` does."""
    return "_".join(part for part in (namespace, subsystem, name) if part)


def validate_metric_name(name: str) -> str:
    if not _METRIC_NAME_RE.match(name):
        raise ConstructionError("Invalid metric name", metric_name=name)
    return name


def validate_label_name(name: str, *, metric_name: str | None = None) -> str:
    if not isinstance(name, str) or not _LABEL_NAME_RE.match(name):
        raise ConstructionError(
            "Invalid label name", metric_name=metric_name, label_name=str(name)
        )
    if name.startswith(_RESERVED_LABEL_PREFIX):
        raise ConstructionError(
            f"Label names starting with '{_RESERVED_LABEL_PREFIX}' are reserved",
            metric_name=metric_name,
            label_name=name,
        )
    return name


__all__ = ["build_metric_name", "validate_label_name", "validate_metric_name"]
