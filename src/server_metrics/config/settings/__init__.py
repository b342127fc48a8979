"""Config settings – 12-factor env-based configuration."""
from server_metrics.config.settings.base import Settings
from server_metrics.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from server_metrics.config.settings.metrics import MetricsSettings

__all__ = ["EnvSettingsLoader", "MetricsSettings", "Settings", "SettingsLoader"]
