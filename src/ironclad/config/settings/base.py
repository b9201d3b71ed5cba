"""Config settings – Settings base class and IroncladSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from ironclad.config.validation import InvalidSettingValueError
from ironclad.observability.logging import LOG_FORMATS


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, name: str) -> str:
        """Environment variable for field *name*: ``<PREFIX>_<NAME>``, upper-cased."""
        return f"{cls._prefix}_{name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _invalid(self, name: str, value: object, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(name, value, reason, env_key=self.env_key(name))


@dataclasses.dataclass
class IroncladSettings(Settings):
    """Defaults for the CLI, overridable through ``IRONCLAD_*`` variables."""

    _prefix: ClassVar[str] = "IRONCLAD"

    log_level: str = "WARNING"
    log_format: str = "console"
    hash_algorithm: str = "sha256"
    hash_encoding: str = "hex"
    salt_length: int = 16
    random_length: int = 16
    random_charset: str = "alphanumeric"
    file_encoding: str = "utf-8"

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise self._invalid("log_level", self.log_level, "unknown logging level")
        if self.log_format not in LOG_FORMATS:
            raise self._invalid(
                "log_format", self.log_format, f"expected one of {sorted(LOG_FORMATS)}"
            )
        for name in ("salt_length", "random_length"):
            value = getattr(self, name)
            if value <= 0:
                raise self._invalid(name, value, "must be a positive integer")


__all__ = ["IroncladSettings", "Settings"]
