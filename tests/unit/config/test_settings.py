"""Unit tests for config settings & validation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from server_metrics.config.settings import EnvSettingsLoader, MetricsSettings, Settings
from server_metrics.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass(frozen=True)
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    dsn: str


@dataclass(frozen=True)
class StrictSettings(Settings):
    _prefix: ClassVar[str] = "STRICT"

    workers: int = 1

    def _validate(self) -> None:
        if self.workers < 1:
            raise ValueError("workers must be positive")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for raw, expected in (("true", True), ("1", True), ("off", False), ("no", False)):
            monkeypatch.setenv("APP_DEBUG", raw)
            assert EnvSettingsLoader().load(AppSettings).debug is expected

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_RATIO", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_env_key_without_prefix(self) -> None:
        @dataclass(frozen=True)
        class Bare(Settings):
            level: str = "info"

        assert Bare.env_key("level") == "LEVEL"

    def test_missing_required_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_DSN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_DSN"

    def test_bad_coercion_is_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "not-a-number")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_validation_failure_is_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRICT_WORKERS", "0")
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert isinstance(exc_info.value.__cause__, ValueError)


# ---------------------------------------------------------------------------
# MetricsSettings
# ---------------------------------------------------------------------------


class TestMetricsSettings:
    def test_defaults(self) -> None:
        s = MetricsSettings()
        assert (s.namespace, s.subsystem, s.target_label, s.query_label) == (
            "pg",
            "exporter",
            "datname",
            "query",
        )

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER_METRICS_NAMESPACE", "mysql")
        monkeypatch.setenv("SERVER_METRICS_TARGET_LABEL", "instance")
        s = EnvSettingsLoader().load(MetricsSettings)
        assert s.namespace == "mysql"
        assert s.target_label == "instance"
        assert s.subsystem == "exporter"

    def test_target_and_query_label_must_differ(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            MetricsSettings(target_label="query")
        assert exc_info.value.setting_name == "query_label"

    def test_empty_namespace_and_subsystem_allowed(self) -> None:
        s = MetricsSettings(namespace="", subsystem="")
        assert (s.namespace, s.subsystem) == ("", "")

    def test_is_frozen(self) -> None:
        s = MetricsSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.target_label = "instance"  # type: ignore[misc]

    def test_env_key(self) -> None:
        assert MetricsSettings.env_key("target_label") == "SERVER_METRICS_TARGET_LABEL"

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            MetricsSettings(target_label="")
        with pytest.raises(InvalidSettingValueError):
            MetricsSettings(query_label="")

    def test_invalid_env_value_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER_METRICS_QUERY_LABEL", "datname")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(MetricsSettings)
