"""
Configuration loader for scopelog.

Precedence (lowest to highest):
1. Defaults (LoggingOptions)
2. YAML file
3. Environment variables

The YAML file uses the same keys as LogContext.config(). Logger
overrides may sit at top level or under a `loggers:` mapping:

    rootLogger: INFO
    showTime: false
    loggers:
      Controller::*: WARN
      Controller::people: DEBUG
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..diagnostics import get_logger
from ..errors import ConfigError
from .schema import CONTROL_KEYS, LoggingOptions

logger = get_logger(__name__)

LOGGERS_KEY = "loggers"

# Env var -> public option key
ENV_KEYS: dict[str, str] = {
    "SCOPELOG_ROOT_LOGGER": "rootLogger",
    "SCOPELOG_SHOW_TIME": "showTime",
    "SCOPELOG_REMOTE_PORT": "remoteLoggingPort",
}


def load_yaml_options(config_path: Path | None) -> dict[str, Any]:
    """Load raw options from a YAML file.

    Args:
        config_path: Path to the YAML file, or None to skip

    Returns:
        Mapping read from the file, or an empty dict

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigError: If the file is not valid YAML or not a mapping
    """
    if not config_path:
        return {}

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_env_overrides(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read control options from SCOPELOG_* environment variables.

    Args:
        env: Environment to read, os.environ by default

    Returns:
        Option key -> raw string value for every variable that is set
    """
    env = os.environ if env is None else env
    return {key: env[var] for var, key in ENV_KEYS.items() if env.get(var)}


def split_options(raw: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split raw options into (control options, logger overrides).

    Raises:
        ConfigError: If the `loggers` entry is not a mapping
    """
    control: dict[str, Any] = {}
    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        if key == LOGGERS_KEY:
            if not isinstance(value, dict):
                raise ConfigError(f"'{LOGGERS_KEY}' must be a mapping of logger name -> level")
            overrides.update({str(name): level for name, level in value.items()})
        elif key in CONTROL_KEYS:
            control[CONTROL_KEYS[key]] = value
        else:
            overrides[str(key)] = value
    return control, overrides


def load_options(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> LoggingOptions:
    """Load and validate the full configuration.

    Args:
        config_path: YAML file, optional
        env: Environment mapping, os.environ by default

    Returns:
        Validated LoggingOptions

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigError: If the file or an env value cannot be used
    """
    raw = load_yaml_options(config_path)
    raw.update(load_env_overrides(env))

    control, overrides = split_options(raw)
    try:
        options = LoggingOptions.model_validate(control)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    options = options.merge(overrides)
    logger.debug(
        "config.loaded",
        path=str(config_path) if config_path else None,
        overrides=len(options.overrides),
    )
    return options
