"""Configuration loader module.

This module provides functions for loading configuration from a YAML file
and environment variables and turning it into a validated ShimkitConfig.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .exceptions import ConfigError
from .schema import ShimkitConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "shimkit.yaml"

# Environment keys (without prefix) mapped to their config path
ENV_KEYS: Dict[str, List[str]] = {
    "LOGGING_LEVEL": ["logging", "level"],
    "LOGGING_FORMAT": ["logging", "format"],
    "RESOLVER_VENDOR_PREFIXES": ["resolver", "vendor_prefixes"],
}

LIST_KEYS = {"RESOLVER_VENDOR_PREFIXES"}


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        New dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    import yaml

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")
    return data


def load_from_env(prefix: str = "SHIMKIT") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    Only the keys in ``ENV_KEYS`` are recognized. List values are
    comma-separated; an empty item stands for the unprefixed candidate.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Nested dictionary containing configuration from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = prefix.upper()

    for env_key, path in ENV_KEYS.items():
        value = os.environ.get(f"{prefix_upper}_{env_key}")
        if value is None:
            continue

        typed_value: Any = value
        if env_key in LIST_KEYS:
            typed_value = [item.strip() for item in value.split(",")]

        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = typed_value

    return result


def load_config(
    file_path: Optional[str] = None, env_prefix: str = "SHIMKIT"
) -> ShimkitConfig:
    """Load ShimkitConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to $SHIMKIT_CONFIG or "shimkit.yaml")
        env_prefix: Prefix for environment variables

    Returns:
        Validated ShimkitConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix}_CONFIG", DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = {}

    if os.path.exists(path):
        config_data = merge_dicts(config_data, load_yaml_file(path))
        logger.debug("Loaded configuration file %s", path)

    # Environment overrides file
    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)
        logger.debug("Applied environment overrides: %s", sorted(env_config))

    try:
        return ShimkitConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e
