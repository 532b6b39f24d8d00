"""Platform detection for the launcher.

Classifies the running OS and exposes a per-platform capability table that
every other component consults instead of branching on the OS itself.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple


class PlatformKind(str, Enum):
    """Operating systems the launcher distinguishes."""

    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"
    OTHER = "other"

    @property
    def is_unix(self) -> bool:
        """True for Linux and Mac."""
        return self in (PlatformKind.LINUX, PlatformKind.MAC)


class DataDirStrategy(str, Enum):
    """How the platform-default data directory is derived."""

    EXECUTABLE_DIR = "executable_dir"
    XDG_DATA = "xdg_data"
    APPLICATION_SUPPORT = "application_support"
    NONE = "none"


# platform.system() value -> kind
_SYSTEM_MAP = {
    "windows": PlatformKind.WINDOWS,
    "linux": PlatformKind.LINUX,
    "darwin": PlatformKind.MAC,
}


def detect_platform(system: Optional[str] = None) -> PlatformKind:
    """Classify an OS name.

    Args:
        system: Raw value of platform.system(); detected when omitted.

    Returns:
        The matching PlatformKind, or OTHER for anything unrecognised.
    """
    if system is None:
        system = platform.system()
    return _SYSTEM_MAP.get(system.lower(), PlatformKind.OTHER)


@lru_cache(maxsize=1)
def get_platform_kind() -> PlatformKind:
    """Return the running platform, detected once per process."""
    return detect_platform()


@dataclass(frozen=True)
class PlatformCapabilities:
    """How each external operation is carried out on one platform.

    Attributes:
        kind: Platform this table describes.
        url_opener: Command prefix that opens a URL. None on Windows, where
            URLs are handed to the shell association, and on OTHER.
        file_manager: Executable of the file-manager front end.
        reveal_arguments: Arguments placed before a file path to reveal and
            select it. None where the platform can only open the parent.
        java_launcher: Command prefix that runs ``java``.
        java_probe: Full command that queries the Java version.
        data_dir_strategy: Source of the platform-default data directory.
        patch_tool_bundled: xdelta ships with the launcher data.
    """

    kind: PlatformKind
    url_opener: Optional[Tuple[str, ...]] = None
    file_manager: Optional[str] = None
    reveal_arguments: Optional[Tuple[str, ...]] = None
    java_launcher: Optional[Tuple[str, ...]] = None
    java_probe: Optional[Tuple[str, ...]] = None
    data_dir_strategy: DataDirStrategy = DataDirStrategy.NONE
    patch_tool_bundled: bool = False

    @property
    def opens_urls_with_shell(self) -> bool:
        """URLs are passed straight to the OS shell association."""
        return self.kind == PlatformKind.WINDOWS


_CAPABILITIES = {
    PlatformKind.WINDOWS: PlatformCapabilities(
        kind=PlatformKind.WINDOWS,
        file_manager="explorer.exe",
        reveal_arguments=("/select,",),
        java_launcher=("cmd", "/C", "java"),
        java_probe=("cmd.exe", "/C", "java", "-version"),
        data_dir_strategy=DataDirStrategy.EXECUTABLE_DIR,
        patch_tool_bundled=True,
    ),
    PlatformKind.LINUX: PlatformCapabilities(
        kind=PlatformKind.LINUX,
        url_opener=("xdg-open",),
        file_manager="xdg-open",
        java_launcher=("java",),
        java_probe=("java", "-version"),
        data_dir_strategy=DataDirStrategy.XDG_DATA,
    ),
    PlatformKind.MAC: PlatformCapabilities(
        kind=PlatformKind.MAC,
        url_opener=("open",),
        file_manager="open",
        reveal_arguments=("-R",),
        java_launcher=("java",),
        java_probe=("java", "-version"),
        data_dir_strategy=DataDirStrategy.APPLICATION_SUPPORT,
    ),
    PlatformKind.OTHER: PlatformCapabilities(kind=PlatformKind.OTHER),
}


def capabilities_for(kind: PlatformKind) -> PlatformCapabilities:
    """Return the capability table for a platform."""
    return _CAPABILITIES[kind]


def get_capabilities() -> PlatformCapabilities:
    """Return the capability table for the running platform."""
    return capabilities_for(get_platform_kind())
