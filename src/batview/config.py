"""
Configuration loading and validation for batview.

This module handles configuration file parsing, validation, and provides
sensible defaults for all configuration options.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from batview.highlighting import DEFAULT_THEME

CONFIG_NAMES = [".batview.yaml", ".batview.yml"]


class OutputConfig(BaseModel):
    """Configuration for terminal output."""

    theme: str = Field(
        default=DEFAULT_THEME,
        description="Syntax highlighting theme (a pygments style name).",
    )
    color: Literal["auto", "always", "never"] = Field(
        default="auto",
        description="When to emit color escape sequences.",
    )


class GitConfig(BaseModel):
    """Configuration for git line annotations."""

    enabled: bool = Field(
        default=True,
        description="Show added/removed/modified markers for files in a git repository.",
    )


class Config(BaseModel):
    """Root configuration model for batview."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    git: GitConfig = Field(default_factory=GitConfig)

    class Config:
        """Pydantic model configuration."""

        extra = "forbid"


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the configuration file. If None, returns defaults.

    Returns:
        Config object with loaded or default values.

    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Config(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}") from e


def default_config_path() -> Path:
    """Location of the per-user configuration file."""
    return Path.home() / ".config" / "batview" / "config.yaml"


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.

    Searches for `.batview.yaml` or `.batview.yml` in the start path and
    parent directories, then falls back to the per-user configuration file.

    Args:
        start_path: Directory to start searching from.

    Returns:
        Path to the config file if found, None otherwise.
    """
    current = start_path.resolve()
    while current != current.parent:
        for name in CONFIG_NAMES:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent

    user_config = default_config_path()
    if user_config.exists():
        return user_config

    return None
