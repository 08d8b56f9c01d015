"""Config – 12-factor env-based configuration."""
from mp_option.config.errors import ConfigError, InvalidSettingValueError
from mp_option.config.loaders import EnvSettingsLoader, SettingsLoader
from mp_option.config.settings import OptionSettings, Settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "OptionSettings",
    "Settings",
    "SettingsLoader",
]
