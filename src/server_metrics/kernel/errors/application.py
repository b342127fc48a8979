"""Application-layer errors — raised while wiring components together."""

from __future__ import annotations

from server_metrics.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
