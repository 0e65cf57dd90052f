"""
Configuration loader — reads dependencies.yml into an InstallConfig.

Used by the CLI. The programmatic entry point takes an InstallConfig
(or a mapping) directly and never touches the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from dynamic_installer.core.models.install import InstallConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "dependencies.yml"


class ConfigError(Exception):
    """Raised when the install configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for dependencies.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to dependencies.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_install_config(path: Path | None = None) -> InstallConfig:
    """Load and validate an install configuration file.

    Args:
        path: Explicit path to the config. If None, searches upward.

    Returns:
        Validated InstallConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found. Create one, or specify --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading install config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under an "install" key or be flat
    if isinstance(data.get("install"), dict):
        data = data["install"]

    try:
        config = InstallConfig.from_mapping(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid install configuration in {path}: {e}") from e

    logger.info("Loaded %d dependencies from %s", len(config.dependencies), path)
    return config
