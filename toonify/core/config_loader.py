"""Configuration loader for toonify"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from toonify.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".toonify.yaml"
CONFIG_PATH_ENV = "TOONIFY_CONFIG_PATH"
LOG_LEVEL_ENV = "TOONIFY_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ToonifyConfig(BaseModel):
    """Default settings applied when a CLI flag is not given."""

    compact: bool = Field(default=False, description="Write compact TOON output")
    estimate_tokens: bool = Field(
        default=False, description="Report token estimates after converting"
    )
    json_indent: int = Field(default=2, description="Indentation for JSON output")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("json_indent")
    def validate_indent_not_negative(cls, v):
        if v < 0:
            raise ValueError("json_indent must not be negative")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _resolve_config_path(config_path: Optional[str]) -> Optional[Path]:
    """
    Pick the configuration file to read.

    Returns:
        Path to read, or None when no file was requested and the default is absent

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist
    """
    requested = config_path or os.getenv(CONFIG_PATH_ENV)
    if requested:
        path = Path(requested)
        if not path.exists():
            raise FileNotFoundError(
                f"toonify config file not found: {path}\n"
                f"Check --config or the {CONFIG_PATH_ENV} environment variable"
            )
        return path

    default = Path(DEFAULT_CONFIG_PATH)
    return default if default.exists() else None


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(config_path: Optional[str] = None) -> ToonifyConfig:
    """Load toonify settings from YAML with environment variable overrides

    Args:
        config_path: Path to config file (default: TOONIFY_CONFIG_PATH env var or .toonify.yaml)

    Returns:
        Validated ToonifyConfig

    Raises:
        FileNotFoundError: If a requested config file is missing
        ConfigError: If the file holds invalid settings
    """
    path = _resolve_config_path(config_path)
    data = _read_yaml(path) if path else {}

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        data["log_level"] = env_level

    try:
        config = ToonifyConfig.model_validate(data)
    except ValidationError as e:
        messages = []
        for err in e.errors():
            location = " -> ".join(str(loc) for loc in err["loc"])
            messages.append(f"'{location}': {err['msg']}")
        raise ConfigError("Invalid configuration: " + "; ".join(messages)) from e

    logger.debug("Loaded configuration from %s", path or "defaults")
    return config
