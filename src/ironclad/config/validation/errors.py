"""Config validation – errors raised while loading IRONCLAD_* settings."""
from __future__ import annotations

from typing import Any

from ironclad.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the CLI reports it and exits with 1."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError, ValueError):
    """A setting is present but unusable (bad number, unknown level or format).

    ``setting`` is the dataclass field, ``env_key`` the variable it was read
    from (``IRONCLAD_LOG_LEVEL`` for ``log_level``).
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting: str,
        value: Any,
        reason: str,
        *,
        env_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.setting = setting
        self.env_key = env_key or setting
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for {self.env_key}: {reason}", **kwargs)
        self.detail.setdefault("setting", setting)
        self.detail.setdefault("env_key", self.env_key)
        self.detail.setdefault("value", value)


__all__ = ["ConfigError", "InvalidSettingValueError"]
