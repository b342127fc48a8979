"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        └── ConfigError      (server_metrics.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            └── ConstructionError
"""

from server_metrics.kernel.errors.application import ApplicationError
from server_metrics.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
