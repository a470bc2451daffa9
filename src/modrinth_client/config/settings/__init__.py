"""Config settings – 12-factor env-based configuration."""
from modrinth_client.config.settings.base import ClientSettings, Settings
from modrinth_client.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["ClientSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
