"""Locations of provider config, packaged defaults and local state."""

from pathlib import Path
from typing import Optional

DIR_NAME = ".mcprovider"
CONFIG_FILE = "config.yaml"
STATE_FILE = "state.json"

# Resolved against the working directory at use.
DEFAULT_STATE_PATH = Path(DIR_NAME) / STATE_FILE


def get_user_config_path() -> Path:
    """~/.mcprovider/config.yaml"""
    return Path.home() / DIR_NAME / CONFIG_FILE


def get_project_config_path() -> Optional[Path]:
    """.mcprovider/config.yaml under the working directory, or None if there is none."""
    project_config = Path.cwd() / DIR_NAME / CONFIG_FILE
    return project_config if project_config.is_file() else None


def get_config_path() -> Path:
    """
    Config file that ``save_config`` and ``load_config`` treat as primary.

    Returns:
        Project config if it exists, otherwise the user config
    """
    return get_project_config_path() or get_user_config_path()


def get_defaults_path() -> Path:
    return Path(__file__).parent / "defaults.yaml"
