"""
Configuration module for the voting portal.

settings.py is the single entry point for configuration values.
"""

from src.infrastructure.config.sentry import init_sentry
from src.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
    settings,
)


__all__ = [
    "ENV_FILE_PATH",
    "Settings",
    "find_env_file",
    "get_settings",
    "init_sentry",
    "reload_settings",
    "settings",
]
