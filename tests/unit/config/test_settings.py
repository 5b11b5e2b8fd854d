"""Unit tests for config settings & validation."""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from vr_commons.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RevisionSettings,
    Settings,
)
from vr_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from vr_commons.kernel.revision import DeserializationMode

_VR_KEYS = ("VR_DEFAULT_MODE", "VR_REMEMBER_MODES", "VR_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # set-then-delete so teardown also removes anything load_dotenv wrote
    for key in _VR_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@dataclass
class StoreSettings(Settings):
    _prefix: ClassVar[str] = "STORE"

    table: str = "entities"
    retries: int = 3
    ratio: float = 0.5
    strict: bool = False
    regions: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_coerces_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_TABLE", "itineraries")
        monkeypatch.setenv("STORE_RETRIES", "5")
        monkeypatch.setenv("STORE_RATIO", "0.25")
        monkeypatch.setenv("STORE_STRICT", "yes")
        monkeypatch.setenv("STORE_REGIONS", "eu, us ,")
        settings = EnvSettingsLoader().load(StoreSettings)
        assert settings.table == "itineraries"
        assert settings.retries == 5
        assert settings.ratio == 0.25
        assert settings.strict is True
        assert settings.regions == ["eu", "us"]

    def test_defaults_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("STORE_TABLE", "STORE_RETRIES", "STORE_RATIO", "STORE_STRICT", "STORE_REGIONS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(StoreSettings)
        assert settings == StoreSettings()

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str = dataclasses.field()

        monkeypatch.delenv("STRICT_REQUIRED_FIELD", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert exc_info.value.setting_name == "STRICT_REQUIRED_FIELD"

    def test_bad_number_is_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_RETRIES", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(StoreSettings)
        assert exc_info.value.setting_name == "STORE_RETRIES"


# ---------------------------------------------------------------------------
# RevisionSettings
# ---------------------------------------------------------------------------


class TestRevisionSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader().load(RevisionSettings)
        assert settings.deserialization_mode is DeserializationMode.WITHOUT_QUOTATIONS
        assert settings.remember_modes is True
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VR_DEFAULT_MODE", "with_quotations")
        monkeypatch.setenv("VR_REMEMBER_MODES", "false")
        monkeypatch.setenv("VR_LOG_LEVEL", "debug")
        settings = EnvSettingsLoader().load(RevisionSettings)
        assert settings.deserialization_mode is DeserializationMode.WITH_QUOTATIONS
        assert settings.remember_modes is False
        assert settings.log_level == "debug"

    def test_invalid_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VR_DEFAULT_MODE", "SOMETIMES")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(RevisionSettings)
        assert exc_info.value.setting_name == "default_mode"
        assert isinstance(exc_info.value, ConfigError)

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RevisionSettings(log_level="LOUD")


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("VR_DEFAULT_MODE=WITH_QUOTATIONS\nVR_REMEMBER_MODES=0\n")
        settings = DotenvSettingsLoader(str(env_file)).load(RevisionSettings)
        assert settings.deserialization_mode is DeserializationMode.WITH_QUOTATIONS
        assert settings.remember_modes is False
