"""Config – 12-factor settings and loaders."""

from modrinth_client.config.settings import (
    ClientSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from modrinth_client.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ClientSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
