"""Application settings models."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from replicadash.constants.defaults import (
    COMMAND_TIMEOUT_SECONDS_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    REPLICA_SET_KIND_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
)
from replicadash.constants.enums import OutputFormat, ReplicaSetKind

logger = logging.getLogger(__name__)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    # Cluster access
    context: str | None = None
    request_timeout: str = REQUEST_TIMEOUT_DEFAULT  # kubectl --request-timeout
    command_timeout_seconds: int = COMMAND_TIMEOUT_SECONDS_DEFAULT
    replica_set_kind: ReplicaSetKind = REPLICA_SET_KIND_DEFAULT

    # Output
    output_format: OutputFormat = OUTPUT_FORMAT_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def load_settings(path: str | Path | None = None) -> AppSettings:
    """Load settings from a YAML or JSON file.

    Args:
        path: Settings file. When None, defaults are returned.

    Returns:
        Validated AppSettings.

    Raises:
        ConfigLoadError: If the file cannot be read, parsed or validated.
    """
    if path is None:
        return AppSettings()

    settings_path = Path(path)
    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigLoadError(f"Unable to read settings from {settings_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"Settings in {settings_path} must be a mapping")

    try:
        settings = AppSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

    logger.debug("Loaded settings from %s", settings_path)
    return settings
