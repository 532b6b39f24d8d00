"""Launcher settings model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class LauncherConfig:
    """Settings read from the launcher config file.

    Attributes:
        mirror_index: Catalog index of the preferred autopatcher mirror.
        custom_mirror: User-supplied mirror tried before the catalog.
        log_to_file: Also write logs to Logs/ in the data directory.
        java_working_directory: Working directory for jar invocations.
    """

    mirror_index: int = 0
    custom_mirror: Optional[str] = None
    log_to_file: bool = True
    java_working_directory: Optional[str] = None

    # Where the values came from, for diagnostics
    _config_sources: List[str] = field(default_factory=list, repr=False, compare=False)
