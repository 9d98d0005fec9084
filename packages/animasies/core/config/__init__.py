"""Configuration management for Animasies."""

from animasies.core.config.loader import (
    clear_app_config_cache,
    configure_logging,
    load_app_config,
    load_config,
)
from animasies.core.config.models import AppConfig, CurveSettings, LoggingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "clear_app_config_cache",
    "configure_logging",
    # Models
    "AppConfig",
    "CurveSettings",
    "LoggingConfig",
]
