"""Configuration file loading.

Handles loading the launcher settings from YAML with:
- Platform config location (XDG_CONFIG_HOME, Library/Preferences, data dir)
- Explicit config path from the command line
- Environment variable expansion (${VAR})
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from am2rlauncher.bootstrap.environment import LauncherEnvironment
from am2rlauncher.bootstrap.paths import launcher_config_file
from am2rlauncher.config.models import LauncherConfig
from am2rlauncher.config.validation import validate_config
from am2rlauncher.core.logging import get_logger

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def find_config(environment: LauncherEnvironment) -> Optional[Path]:
    """Return the platform config file location for ``environment``."""
    return launcher_config_file(environment.kind, environment.paths.home)


def load_config(
    path: Optional[Path] = None,
    environment: Optional[LauncherEnvironment] = None,
) -> LauncherConfig:
    """Load launcher settings.

    Args:
        path: Explicit config file (--config flag). Must exist.
        environment: Used to locate the platform config file when no path
            is given. A missing platform config yields defaults.

    Returns:
        LauncherConfig instance.

    Raises:
        ConfigError: If the explicit file doesn't exist or a file has parse errors.
    """
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        source = "custom"
    else:
        if environment is None:
            environment = LauncherEnvironment.detect()
        path = find_config(environment)
        if path is None or not path.exists():
            LOGGER.debug("No launcher config file found, using defaults")
            return LauncherConfig()
        source = "platform"

    try:
        data = load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    config = dict_to_config(data, source=str(path))
    config._config_sources = [f"{source}:{path}"]
    LOGGER.debug(f"Loaded {source} config from {path}")
    return config


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def dict_to_config(data: Dict[str, Any], source: str = "<memory>") -> LauncherConfig:
    """Convert a parsed config mapping into LauncherConfig.

    Keys flagged by validation keep their defaults.
    """
    flagged = {w.key for w in validate_config(data, source=source)}
    values = {k: v for k, v in data.items() if k not in flagged}
    return LauncherConfig(**values)
