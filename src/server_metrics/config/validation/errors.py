"""Config validation errors."""
from __future__ import annotations

from server_metrics.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ConstructionError(ConfigError):
    """A metric family could not be defined from the given names and labels.

    Raised once, while a recorder is being built. The inputs are static
    configuration, so callers should abort target setup instead of retrying.
    """
    default_code = "metric_construction_error"

    def __init__(
        self,
        reason: str,
        *,
        metric_name: str | None = None,
        label_name: str | None = None,
    ) -> None:
        super().__init__(reason, detail={"metric_name": metric_name, "label_name": label_name})
        self.metric_name = metric_name
        self.label_name = label_name


__all__ = [
    "ConfigError",
    "ConstructionError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
