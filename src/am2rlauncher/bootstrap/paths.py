"""Data directory resolution and path layout for the launcher.

The data directory is the single writable root for everything the launcher
persists (patch data, profiles, mods, logs). It is resolved once per process:

    1. AM2RLAUNCHERDATA environment variable (if set and non-blank)
    2. Platform default:
         Windows: directory containing the executable
         Linux:   ${XDG_DATA_HOME:-$HOME/.local/share}/AM2RLauncher
         Mac:     $HOME/Library/Application Support/AM2RLauncher
    3. Directory containing the executable

Any filesystem error on a tier is logged and resolution moves on.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import ClassVar, Mapping, Optional, Union

from am2rlauncher.bootstrap.platform import (
    DataDirStrategy,
    PlatformKind,
    capabilities_for,
    get_platform_kind,
)
from am2rlauncher.core.logging import get_logger

LOGGER = get_logger(__name__)

APP_NAME = "AM2RLauncher"

# Environment variable to override the data directory
DATA_DIR_ENV = "AM2RLAUNCHERDATA"

CONFIG_FILE_NAME = "config.yml"


class DataPathProvenance(str, Enum):
    """Which resolution tier produced the data directory."""

    ENV_OVERRIDE = "env_override"
    PLATFORM_DEFAULT = "platform_default"
    EXECUTABLE_FALLBACK = "executable_fallback"


@dataclass(frozen=True)
class ResolvedDataPath:
    """An absolute data directory plus how it was obtained."""

    path: Path
    provenance: DataPathProvenance


def executable_directory() -> Path:
    """Return the directory containing the running executable or script."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


def home_directory(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return $HOME, falling back to the OS notion of the user home."""
    env = os.environ if environ is None else environ
    home = env.get("HOME", "").strip()
    if home:
        return Path(home)
    return Path.home()


def _env_path(environ: Mapping[str, str], name: str, default: Path) -> Path:
    value = environ.get(name, "").strip()
    return Path(value) if value else default


class DataDirectoryResolver:
    """Resolve the launcher data directory through the fallback chain."""

    def __init__(
        self,
        kind: PlatformKind,
        environ: Optional[Mapping[str, str]] = None,
        executable_dir: Optional[Path] = None,
        app_name: str = APP_NAME,
    ) -> None:
        self._kind = kind
        self._environ = os.environ if environ is None else environ
        self._executable_dir = executable_dir
        self._app_name = app_name

    def resolve(self) -> ResolvedDataPath:
        """Return the data directory. Never raises."""
        override = self._environ.get(DATA_DIR_ENV, "").strip()
        if override:
            created = self._try_create(Path(override))
            if created is not None:
                LOGGER.info(f"Data directory is set to {created}")
                return ResolvedDataPath(created, DataPathProvenance.ENV_OVERRIDE)

        default = self._platform_default()
        if default is not None:
            return ResolvedDataPath(default, DataPathProvenance.PLATFORM_DEFAULT)

        LOGGER.info("Falling back to the executable directory for launcher data.")
        return ResolvedDataPath(
            self._fallback_dir(), DataPathProvenance.EXECUTABLE_FALLBACK
        )

    def _platform_default(self) -> Optional[Path]:
        strategy = capabilities_for(self._kind).data_dir_strategy

        if strategy == DataDirStrategy.EXECUTABLE_DIR:
            LOGGER.info("Using default Windows data directory.")
            return self._fallback_dir()

        if strategy == DataDirStrategy.NONE:
            LOGGER.error(f"{self._kind.value} has no default data directory!")
            return None

        try:
            if strategy == DataDirStrategy.XDG_DATA:
                xdg_data = self._environ.get("XDG_DATA_HOME", "").strip()
                if xdg_data:
                    data_home = Path(xdg_data)
                else:
                    data_home = home_directory(self._environ) / ".local" / "share"
            else:
                data_home = home_directory(self._environ) / "Library" / "Application Support"
        except (RuntimeError, KeyError) as e:
            # Path.home() fails for users without a passwd entry
            LOGGER.error(f"Could not determine the home directory: {e}. Falling back to defaults.")
            return None

        candidate = self._try_create(data_home / self._app_name)

        if candidate is not None:
            LOGGER.info(f"Data directory is set to {candidate}")
        return candidate

    def _fallback_dir(self) -> Path:
        if self._executable_dir is not None:
            return self._executable_dir.resolve()
        return executable_directory()

    def _try_create(self, directory: Path) -> Optional[Path]:
        """Create ``directory`` and return its absolute path, or None on failure."""
        try:
            directory = Path(os.path.abspath(directory.expanduser()))
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, RuntimeError) as e:
            LOGGER.error(f"There was an error with '{directory}': {e}. Falling back to defaults.")
            return None
        if not os.access(directory, os.W_OK):
            LOGGER.error(f"'{directory}' is not writable. Falling back to defaults.")
            return None
        return directory


@lru_cache(maxsize=1)
def get_data_path() -> ResolvedDataPath:
    """Resolve the data directory once for the running process."""
    return DataDirectoryResolver(get_platform_kind()).resolve()


def launcher_config_file(
    kind: PlatformKind,
    data_dir: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    """Return where the launcher settings file lives on ``kind``.

    Linux keeps it under XDG_CONFIG_HOME, Mac under Library/Preferences and
    Windows next to the launcher data. Unsupported platforms have none.
    """
    env = os.environ if environ is None else environ
    if kind == PlatformKind.LINUX:
        home = home_directory(env)
        config_home = _env_path(env, "XDG_CONFIG_HOME", home / ".config")
        return config_home / APP_NAME / CONFIG_FILE_NAME
    if kind == PlatformKind.MAC:
        return home_directory(env) / "Library" / "Preferences" / APP_NAME / CONFIG_FILE_NAME
    if kind == PlatformKind.WINDOWS:
        return data_dir / CONFIG_FILE_NAME
    return None


@dataclass(frozen=True)
class LauncherPaths:
    """Paths within the launcher data directory.

    Directory structure:
        <data dir>/
            PatchData/                          - Autopatcher repository
                utilities/xdelta/xdelta3.exe    - Bundled xdelta (Windows)
            Profiles/                           - Installed game profiles
            Mods/                               - Downloaded mod archives
            Logs/                               - Launcher log files
    """

    home: Path

    _PATCH_DATA_DIR: ClassVar[str] = "PatchData"
    _PROFILES_DIR: ClassVar[str] = "Profiles"
    _MODS_DIR: ClassVar[str] = "Mods"
    _LOGS_DIR: ClassVar[str] = "Logs"
    _LOG_FILE: ClassVar[str] = "AM2RLauncher.log"

    @classmethod
    def default(cls) -> "LauncherPaths":
        """Create paths from the process-wide data directory."""
        return cls(get_data_path().path)

    @property
    def patch_data_dir(self) -> Path:
        """Directory holding the autopatcher data."""
        return self.home / self._PATCH_DATA_DIR

    @property
    def bundled_xdelta(self) -> Path:
        """xdelta binary shipped with the Windows autopatcher."""
        return self.patch_data_dir / "utilities" / "xdelta" / "xdelta3.exe"

    @property
    def profiles_dir(self) -> Path:
        return self.home / self._PROFILES_DIR

    @property
    def mods_dir(self) -> Path:
        return self.home / self._MODS_DIR

    @property
    def logs_dir(self) -> Path:
        return self.home / self._LOGS_DIR

    @property
    def log_file(self) -> Path:
        return self.logs_dir / self._LOG_FILE

    def resolve(self, path: Union[str, Path]) -> Path:
        """Anchor a relative path at the data directory."""
        path = Path(path).expanduser()
        return path if path.is_absolute() else self.home / path

    def relative_to_home(self, path: Union[str, Path]) -> str:
        """Strip the data directory prefix from ``path``.

        Paths outside the data directory are returned unchanged.
        """
        try:
            return str(Path(path).relative_to(self.home))
        except ValueError:
            return str(path)

    def ensure_directories(self) -> None:
        """Create all launcher directories if they don't exist."""
        directories = [
            self.home,
            self.patch_data_dir,
            self.profiles_dir,
            self.mods_dir,
            self.logs_dir,
        ]
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)
