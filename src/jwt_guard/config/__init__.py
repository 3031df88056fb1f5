"""Config – env-driven settings for the token validator."""
from jwt_guard.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    TokenValidatorSettings,
)
from jwt_guard.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsLoader",
    "TokenValidatorSettings",
]
