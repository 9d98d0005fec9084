"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from animasies.core.config.models import AppConfig
from animasies.core.utils import logging as logging_utils
from animasies.core.utils.json import read_json

logger = logging.getLogger(__name__)

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = Path("animasies.json")
_app_config_cache: AppConfig | None = None

ENV_MAX_STEPS = "ANIMASIES_MAX_STEPS"
ENV_LOG_LEVEL = "ANIMASIES_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("animasies.json")
        'json'
        >>> detect_format("animasies.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = read_json(path)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. Environment variables
    ``ANIMASIES_MAX_STEPS`` and ``ANIMASIES_LOG_LEVEL`` override file values.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to animasies.json in the working directory.

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH

    if _app_config_cache is not None and path == _DEFAULT_APP_CONFIG_PATH:
        return _app_config_cache

    raw_config = load_config(path) if Path(path).exists() else {}
    _apply_env_overrides(raw_config)
    config = AppConfig.model_validate(raw_config)

    if path == _DEFAULT_APP_CONFIG_PATH:
        _app_config_cache = config

    return config


def clear_app_config_cache() -> None:
    """Drop the cached default configuration."""
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    logging_utils.configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(raw_config: dict[str, Any]) -> None:
    """Load environment variable overrides into a raw config dict.

    This mutates raw_config; validation happens afterwards.

    Args:
        raw_config: Raw configuration dictionary to populate
    """
    max_steps = os.getenv(ENV_MAX_STEPS)
    if max_steps:
        logger.debug(f"Loaded {ENV_MAX_STEPS} from environment")
        raw_config.setdefault("curves", {})["max_steps"] = max_steps

    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        logger.debug(f"Loaded {ENV_LOG_LEVEL} from environment")
        raw_config.setdefault("logging", {})["level"] = log_level.upper()
