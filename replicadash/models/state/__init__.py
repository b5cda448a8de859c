"""Application state models."""

from replicadash.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    load_settings,
)

__all__ = ["AppSettings", "ConfigError", "ConfigLoadError", "load_settings"]
