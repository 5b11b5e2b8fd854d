"""Config settings – RevisionSettings."""
from __future__ import annotations

import dataclasses
import logging

from vr_commons.config.settings.base import Settings
from vr_commons.config.validation import InvalidSettingValueError
from vr_commons.kernel.revision import DeserializationMode


@dataclasses.dataclass
class RevisionSettings(Settings):
    """Revision resolution settings, read from ``VR_*`` variables."""

    _prefix: dataclasses.ClassVar[str] = "VR"

    default_mode: str = DeserializationMode.WITHOUT_QUOTATIONS.value
    remember_modes: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        modes = [m.value for m in DeserializationMode]
        if self.default_mode.upper() not in modes:
            raise InvalidSettingValueError(
                "default_mode", self.default_mode, f"expected one of {modes}"
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )

    @property
    def deserialization_mode(self) -> DeserializationMode:
        return DeserializationMode(self.default_mode.upper())


__all__ = ["RevisionSettings"]
