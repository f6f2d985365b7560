"""
Configuration for Gottlob.

Settings live in a YAML file, either at the top level or under a
``gottlob:`` key:

    gottlob:
      logic: modal
      notation: ascii
      reverse_polish_fallback: false
      log_level: debug
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GottlobConfig(BaseModel):
    """Validated settings for the logic engine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logic: Literal["classical", "modal"] = "classical"
    notation: Literal["unicode", "ascii"] = "unicode"
    reverse_polish_fallback: bool = True
    log_level: str = "WARNING"

    @field_validator("logic", "notation", mode="before")
    @classmethod
    def lowercase_choice(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(path: Optional[Union[str, Path]] = None) -> GottlobConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML file. If None, defaults are returned.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, malformed, or invalid.
    """
    if path is None:
        return GottlobConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigError("Config file not found", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error: {e}", str(path)) from e

    return config_from_dict(data or {}, source=str(path))


def config_from_dict(data: Dict[str, Any], source: str = "") -> GottlobConfig:
    """Validate a mapping, unwrapping a top-level ``gottlob`` key if present."""
    if isinstance(data, dict) and "gottlob" in data:
        data = data["gottlob"] or {}

    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping", source)

    try:
        return GottlobConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", source) from e


def configure_logging(config: GottlobConfig) -> logging.Logger:
    """Apply the configured level to the package logger."""
    logger = logging.getLogger("backend.gottlob")
    logger.setLevel(getattr(logging, config.log_level))
    return logger
