"""
Configuration loading for remote-driver.

Settings are layered, later layers winning: defaults, then a configuration
file (JSON, YAML or TOML), then ``REMOTE_DRIVER_*`` environment variables,
then programmatic overrides.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml
from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import RemoteDriverConfig

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Configuration could not be read or is invalid."""

    pass


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


_READERS: dict[str, Callable[[Path], Any]] = {
    ".json": _read_json,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
}


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a configuration file, picking the format from its extension.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            extension, cannot be parsed or does not hold a mapping.
    """
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        data = reader(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a mapping")
    return data


def find_config_file(search_paths: Optional[list[str]] = None) -> Optional[Path]:
    """Find the first ``remote-driver.config.*`` file in ``search_paths``."""
    for directory in search_paths or DEFAULT_CONFIG_SEARCH_PATHS:
        base = Path(directory).expanduser()
        for ext in DEFAULT_CONFIG_EXTENSIONS:
            candidate = base / f"{DEFAULT_CONFIG_FILENAME}{ext}"
            if candidate.is_file():
                return candidate
    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge configuration dictionaries. Later ones take precedence."""
    result: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = merge_configs(result[key], value)
            else:
                result[key] = value
    return result


class ConfigLoader:
    """Builds a RemoteDriverConfig from every configuration source.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = True,
    ):
        """Initialize ConfigLoader.

        Args:
            config_file: Explicit configuration file. Errors loading it are raised.
            search_paths: Directories searched when no file is given.
            load_env: Whether to apply environment variables.
            auto_find: Whether to search for a file when none is given.
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths
        self.load_env = load_env
        self.auto_find = auto_find

    def _file_layer(self) -> dict[str, Any]:
        path = self.config_file
        if path is None and self.auto_find:
            path = find_config_file(self.search_paths)
        if path is None:
            return {}
        logger.debug(f"Loading configuration from {path}")
        return load_file(path)

    def _env_layer(self) -> dict[str, Any]:
        if not self.load_env:
            return {}
        try:
            return load_env_config()
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable {e}") from e

    def load(self, overrides: Optional[dict[str, Any]] = None) -> RemoteDriverConfig:
        """Merge all sources into a validated configuration.

        Raises:
            ConfigurationError: If a source cannot be read or the merged
                values are invalid.
        """
        merged = merge_configs(self._file_layer(), self._env_layer(), overrides or {})
        try:
            return RemoteDriverConfig.from_dict(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> RemoteDriverConfig:
    """Load configuration from the default sources.

    Args:
        config_file: Configuration file to use instead of searching.
        overrides: Values that take precedence over every other source.
        load_env: Whether to apply environment variables.
    """
    return ConfigLoader(config_file=config_file, load_env=load_env).load(overrides)
