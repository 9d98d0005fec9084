"""Configuration models for Animasies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from animasies.core.curves.defaults import DEFAULT_MAX_STEPS
from animasies.core.utils.logging import DEFAULT_LOG_FORMAT


class CurveSettings(BaseModel):
    """Limits applied to curve generation."""

    model_config = ConfigDict(extra="forbid")

    max_steps: int = Field(
        default=DEFAULT_MAX_STEPS,
        gt=0,
        description="Maximum number of simulated steps a single curve may take",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_LOG_FORMAT
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    curves: CurveSettings = Field(default_factory=CurveSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
