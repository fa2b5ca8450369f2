"""Configuration loading.

Settings are read, in order of preference, from a standalone
``.shipper-release.toml`` or from the ``[tool.shipper-release]`` table of
``pyproject.toml`` in the project directory. Neither file is required.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shipper_release.config.models import ShipperReleaseConfig
from shipper_release.exceptions import ConfigError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".shipper-release.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
TOOL_TABLE = "shipper-release"


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Unable to read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.shipper-release]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_TABLE, {})


def find_config_data(project_path: Path) -> tuple[dict[str, Any], Path | None]:
    """Locate raw configuration data for a project.

    Returns:
        The raw settings and the file they came from (None for defaults)
    """
    standalone = project_path / CONFIG_FILE_NAME
    if standalone.is_file():
        return load_toml(standalone), standalone

    pyproject = project_path / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        data = extract_tool_config(load_toml(pyproject))
        if data:
            return data, pyproject

    return {}, None


def load_config(project_path: Path | None = None) -> ShipperReleaseConfig:
    """Load the configuration for a project.

    Args:
        project_path: Project root (defaults to the current directory)

    Raises:
        ConfigError: If a configuration file cannot be parsed
        ConfigValidationError: If it contains invalid settings
    """
    project_path = project_path or Path.cwd()
    data, source = find_config_data(project_path)

    try:
        config = ShipperReleaseConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {source}:\n{e}") from e

    if source is None:
        logger.debug("No configuration found in %s, using defaults", project_path)
    else:
        logger.debug("Loaded configuration from %s", source)
    return config
