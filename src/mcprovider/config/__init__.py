"""Configuration module: load provider settings for the MediaConvert client."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import _deep_merge, load_config, save_config
from .models import ProviderConfig, RetryPolicy
from .paths import get_config_path, get_defaults_path, get_project_config_path, get_user_config_path

logger = get_logger("config")

# Later entries win.
ENV_OVERRIDES = (
    ("AWS_REGION", "region"),
    ("MCPROVIDER_REGION", "region"),
    ("MCPROVIDER_PROFILE", "profile"),
    ("MCPROVIDER_ENDPOINT_URL", "endpoint_url"),
)

__all__ = [
    "ProviderConfig",
    "RetryPolicy",
    "get_config_path",
    "get_project_config_path",
    "get_user_config_path",
    "load_config",
    "load_provider_config",
    "save_config",
]


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_provider_config(config_path: Optional[str] = None) -> ProviderConfig:
    """
    Load provider configuration.

    Priority (later wins):
    1. Packaged defaults.yaml
    2. ~/.mcprovider/config.yaml, then .mcprovider/config.yaml
    3. Explicit config file (if provided)
    4. Environment (AWS_REGION, MCPROVIDER_REGION, MCPROVIDER_PROFILE, MCPROVIDER_ENDPOINT_URL)

    Args:
        config_path: Optional path to an explicit config file

    Returns:
        Validated ProviderConfig

    Raises:
        ConfigError: If the explicit file is missing or any value is invalid
    """
    data = _read_yaml(get_defaults_path())
    _deep_merge(data, load_config())

    if config_path is not None:
        _deep_merge(data, _read_yaml(Path(config_path)))
        logger.info(f"Loaded configuration from {config_path}")

    for env_name, key in ENV_OVERRIDES:
        value = os.getenv(env_name)
        if value:
            data[key] = value

    try:
        config = ProviderConfig(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid provider configuration: {e}")

    logger.debug(f"Provider config: region={config.region} endpoint={config.endpoint_url}")
    return config
