"""Process spawning primitives.

Every external tool the launcher drives (browser, file manager, Java, xdelta)
goes through the helpers in this module. They block until the child exits
where a wait is requested and never apply a timeout.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from am2rlauncher.core.logging import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ProcessInvocationSpec:
    """Everything needed to start one external process.

    Attributes:
        executable: Program name (looked up on PATH) or path to a binary.
        arguments: Arguments passed after the executable, one element each.
        working_directory: Directory the child starts in (inherit if None).
        hidden: Suppress the console window and discard the child's output.
    """

    executable: str
    arguments: Tuple[str, ...] = ()
    working_directory: Optional[Path] = None
    hidden: bool = True

    @property
    def command(self) -> List[str]:
        """Return the full argv list."""
        return [self.executable, *self.arguments]


@dataclass(frozen=True)
class SpawnResult:
    """Outcome of a spawn-and-wait call."""

    started: bool
    exit_code: Optional[int] = None

    @classmethod
    def not_found(cls) -> "SpawnResult":
        """Result for an executable that could not be located."""
        return cls(started=False)

    @property
    def succeeded(self) -> bool:
        """True if the process started and exited with code 0."""
        return self.started and self.exit_code == 0


def _popen_kwargs(spec: ProcessInvocationSpec) -> dict:
    kwargs: dict = {}
    if spec.working_directory is not None:
        kwargs["cwd"] = str(spec.working_directory)
    if spec.hidden:
        kwargs["stdout"] = subprocess.DEVNULL
        kwargs["stderr"] = subprocess.DEVNULL
        if sys.platform == "win32":
            kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW
    return kwargs


def start_process(spec: ProcessInvocationSpec) -> subprocess.Popen:
    """Start a process without waiting for it.

    Raises:
        OSError: If the process cannot be started (including not found).
    """
    LOGGER.debug(f"Starting: {spec.command}")
    return subprocess.Popen(spec.command, **_popen_kwargs(spec))


def spawn_and_wait(spec: ProcessInvocationSpec) -> SpawnResult:
    """Start a process and block until it exits.

    A missing executable is reported as ``SpawnResult.not_found()``. Any
    other failure to start (permissions, corrupt binary) propagates.

    Args:
        spec: The invocation to run.

    Returns:
        SpawnResult with the exit code of the finished process.
    """
    try:
        proc = start_process(spec)
    except FileNotFoundError:
        LOGGER.debug(f"Executable not found: {spec.executable}")
        return SpawnResult.not_found()

    exit_code = proc.wait()
    LOGGER.debug(f"{spec.executable} exited with code {exit_code}")
    return SpawnResult(started=True, exit_code=exit_code)


def open_with_shell(target: PathLike) -> None:
    """Hand a URL or document to the Windows shell association.

    Raises:
        OSError: If the shell cannot open the target.
    """
    LOGGER.debug(f"Opening via shell association: {target}")
    os.startfile(str(target))  # type: ignore[attr-defined]
