"""Observability – structured logging helpers."""
from server_metrics.observability.logging.factory import JsonLoggerFactory
from server_metrics.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
