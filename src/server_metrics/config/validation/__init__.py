"""Config validation errors."""
from server_metrics.config.validation.errors import (
    ConfigError,
    ConstructionError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConstructionError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
