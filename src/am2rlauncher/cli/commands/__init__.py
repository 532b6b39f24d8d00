"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier.

        Returns:
            String name of the command.
        """

    @abstractmethod
    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            environment: Platform and data directory of this process.
            config: Launcher settings.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# Import command implementations for convenience
# ruff: noqa: E402
from am2rlauncher.cli.commands.status import StatusCommand
from am2rlauncher.cli.commands.mirrors import MirrorsCommand
from am2rlauncher.cli.commands.open import OpenFolderCommand, OpenUrlCommand
from am2rlauncher.cli.commands.patch import PatchCommand
from am2rlauncher.cli.commands.run_jar import RunJarCommand

__all__ = [
    "Command",
    "StatusCommand",
    "MirrorsCommand",
    "OpenFolderCommand",
    "OpenUrlCommand",
    "PatchCommand",
    "RunJarCommand",
]
