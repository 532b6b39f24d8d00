"""
Bootstrap module for the launcher's platform layer.

This module handles:
- Platform detection and the per-platform capability table
- Data directory resolution (AM2RLAUNCHERDATA, platform default, executable dir)
- Autopatcher mirror lists
- External tool detection (java, xdelta3)
"""

from am2rlauncher.bootstrap.platform import (
    get_capabilities,
    get_platform_kind,
    PlatformCapabilities,
    PlatformKind,
)
from am2rlauncher.bootstrap.paths import (
    get_data_path,
    DataDirectoryResolver,
    LauncherPaths,
    ResolvedDataPath,
)
from am2rlauncher.bootstrap.mirrors import mirrors_for, preferred_mirrors
from am2rlauncher.bootstrap.validation import ToolAvailabilityProbe, ToolId, validate_tools
from am2rlauncher.bootstrap.environment import LauncherEnvironment

__all__ = [
    "get_capabilities",
    "get_platform_kind",
    "PlatformCapabilities",
    "PlatformKind",
    "get_data_path",
    "DataDirectoryResolver",
    "LauncherPaths",
    "ResolvedDataPath",
    "mirrors_for",
    "preferred_mirrors",
    "ToolAvailabilityProbe",
    "ToolId",
    "validate_tools",
    "LauncherEnvironment",
]
