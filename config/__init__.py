"""Configuration helpers for the Brave Search client.

Updates: v0.1.1 - 2026-10-12 - Expose config path and log level defaults.
Updates: v0.1.0 - 2026-10-06 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
    BraveSearchSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "BraveSearchSettings",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_LEVEL",
    "ENV_PREFIX",
    "SettingsError",
    "load_settings",
]
