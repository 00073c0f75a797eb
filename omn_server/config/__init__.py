"""Configuration package for runtime settings and startup validation."""

from .logging import UVICORN_LOG_CONFIG, config_configure_logging
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "UVICORN_LOG_CONFIG",
    "config_configure_logging",
    "config_load_settings",
]
