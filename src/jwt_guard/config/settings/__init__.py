"""Config settings – 12-factor env-based configuration."""
from jwt_guard.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from jwt_guard.config.settings.token_validator import TokenValidatorSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SettingsLoader",
    "TokenValidatorSettings",
]
