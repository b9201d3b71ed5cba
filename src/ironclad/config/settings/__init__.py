"""Config settings – environment-based configuration."""
from ironclad.config.settings.base import IroncladSettings, Settings
from ironclad.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "IroncladSettings", "Settings", "SettingsLoader"]
