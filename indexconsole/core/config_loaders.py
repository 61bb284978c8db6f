"""
Configuration Loading Functions.

Configuration precedence (highest first):
    1. Explicit overrides (CLI flags such as --base-url)
    2. Environment variables (INDEXCONSOLE_*)
    3. YAML file (indexconsole.yaml in the working directory, or --config)
    4. Defaults

Environment Variables
---------------------
    INDEXCONSOLE_BASE_URL   service.base_url
    INDEXCONSOLE_TIMEOUT    service.timeout_sec (seconds, > 0)
    INDEXCONSOLE_LOG_LEVEL  logging.level

YAML values may reference the environment with ${VAR_NAME} or
${VAR_NAME:default}.
"""

from __future__ import annotations

import os
import re
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

import yaml

from indexconsole.core.config.config import ConsoleConfig, ServiceConfig
from indexconsole.core.exceptions import ConfigValidationError
from indexconsole.core.logging import LOG_LEVELS, get_logger
from indexconsole.core.security.env import (
    get_env_float,
    get_env_str,
    get_env_whitelist,
)

CONFIG_FILENAME = "indexconsole.yaml"

logger = get_logger(__name__)


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Handles strings with ${VAR_NAME} or ${VAR_NAME:default} syntax inside
    nested dictionaries and lists.

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with all environment variables expanded
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _apply_env_overrides(config: ConsoleConfig) -> ConsoleConfig:
    """Apply INDEXCONSOLE_* environment variables on top of the file config."""
    base_url = get_env_str("INDEXCONSOLE_BASE_URL")
    timeout = get_env_float("INDEXCONSOLE_TIMEOUT", min_value=0.1)
    if base_url is not None or timeout is not None:
        config.service = ServiceConfig(
            base_url=base_url or config.service.base_url,
            timeout_sec=timeout if timeout is not None else config.service.timeout_sec,
        )

    level = get_env_whitelist("INDEXCONSOLE_LOG_LEVEL", LOG_LEVELS)
    if level is not None:
        config.logging = replace(config.logging, level=level)

    return config


def _read_yaml(config_path: Path) -> dict:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigValidationError(
            f"Could not parse {config_path}: {e}", field=str(config_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"{config_path} must contain a mapping at top level",
            field=str(config_path),
        )
    return expand_env_vars(data)


def load_config(
    config_path: Optional[Path] = None,
    base_path: Optional[Path] = None,
    base_url: Optional[str] = None,
) -> ConsoleConfig:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Explicit config file. Must exist when given.
        base_path: Directory searched for indexconsole.yaml. Defaults to cwd.
        base_url: Override for service.base_url (from the --base-url flag).

    Returns:
        Validated ConsoleConfig.

    Raises:
        ConfigValidationError: If the file is unreadable or a value is invalid.
    """
    if config_path is not None and not config_path.exists():
        raise ConfigValidationError(
            f"Config file not found: {config_path}", field="config"
        )

    if config_path is None:
        candidate = (base_path or Path.cwd()) / CONFIG_FILENAME
        config_path = candidate if candidate.exists() else None

    if config_path is None:
        config = ConsoleConfig()
    else:
        logger.debug("Loading configuration", path=config_path)
        config = ConsoleConfig.from_dict(_read_yaml(config_path))

    config = _apply_env_overrides(config)

    if base_url:
        config.service = ServiceConfig(
            base_url=base_url, timeout_sec=config.service.timeout_sec
        )

    return config