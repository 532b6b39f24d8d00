"""open-url and open-folder command implementations."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig

from am2rlauncher.cli.commands import Command
from am2rlauncher.cli.exit_codes import EXIT_SUCCESS
from am2rlauncher.operations.launcher import ExternalAppLauncher


class OpenUrlCommand(Command):
    """Opens a URL in the default browser."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "open-url"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        ExternalAppLauncher(environment.capabilities).open_url(args.url)
        return EXIT_SUCCESS


class OpenFolderCommand(Command):
    """Opens a folder, or reveals a file with --select."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "open-folder"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        launcher = ExternalAppLauncher(environment.capabilities)
        if args.select:
            launcher.open_folder_and_select_file(args.path)
        else:
            launcher.open_folder(args.path)
        return EXIT_SUCCESS
