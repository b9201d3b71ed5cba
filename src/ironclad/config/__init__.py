"""Config – settings, loaders and validation errors."""

from ironclad.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    IroncladSettings,
    Settings,
    SettingsLoader,
)
from ironclad.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "IroncladSettings",
    "Settings",
    "SettingsLoader",
]
