"""Launcher configuration loading."""

from am2rlauncher.config.loader import ConfigError, load_config
from am2rlauncher.config.models import LauncherConfig

__all__ = ["ConfigError", "LauncherConfig", "load_config"]
