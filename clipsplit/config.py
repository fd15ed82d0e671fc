"""
clipsplit.config - YAML config loading and validation.

Settings come from an explicit config file, else ``clipsplit.yaml`` in the
current directory, else built-in defaults. CLI options override all of them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from clipsplit.exceptions import ConfigError
from clipsplit.logging import logger

DEFAULT_CONFIG_NAME = "clipsplit.yaml"


class SplitConfig(BaseModel):
    """Resolved configuration for one clipsplit run."""

    workers: int | None = Field(default=None, ge=1)

    ffmpeg_path: str = "ffmpeg"
    audio_codec: str = "libmp3lame"
    quality: str = "4"
    extension: str = ".mp3"

    log_level: str = "WARNING"

    @field_validator("quality", mode="before")
    @classmethod
    def coerce_quality(cls, v: Any) -> str:
        # YAML reads `quality: 4` as an int
        return str(v)

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("extension must start with '.', e.g. '.mp3'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of: {valid}")
        return v.upper()

    @property
    def worker_count(self) -> int:
        """Number of extraction workers; defaults to the logical CPU count."""
        return self.workers or os.cpu_count() or 1


def load_config(path: Path | None = None, overrides: dict[str, Any] | None = None) -> SplitConfig:
    """Load and validate configuration.

    Args:
        path: Explicit config file; must exist when given
        overrides: Values that take precedence over the file (None is ignored)

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    if path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        path = default if default.exists() else None
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    raw_config: dict[str, Any] = {}
    if path is not None:
        try:
            with open(path) as f:
                raw_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        if not isinstance(raw_config, dict):
            raise ConfigError(f"{path} must contain a mapping of settings")
        logger.debug("loaded config from %s", path)

    for key, value in (overrides or {}).items():
        if value is not None:
            raw_config[key] = value

    try:
        return SplitConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
