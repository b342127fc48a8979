"""Root error class for the server-metrics error hierarchy."""

from __future__ import annotations

from typing import Any, Mapping


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a machine-readable ``code`` and a flat ``detail``
    mapping naming what was wrong (a setting, a metric, a label). Detail
    values are stored as strings and ``None`` entries are dropped, so the
    mapping can go straight into a structured log event.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Names of the offending settings, metrics or labels.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: Mapping[str, object] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, str] = {
            k: str(v) for k, v in (detail or {}).items() if v is not None
        }
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        """Return the message followed by its detail, e.g. ``bad label (label_name='1x')``."""
        if not self.detail:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in sorted(self.detail.items()))
        return f"{self.message} ({context})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
