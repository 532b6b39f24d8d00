"""Mirrors command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig

from am2rlauncher.bootstrap.mirrors import preferred_mirrors
from am2rlauncher.cli.commands import Command
from am2rlauncher.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS


class MirrorsCommand(Command):
    """Lists autopatcher mirrors in the order they are tried."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "mirrors"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        mirrors = preferred_mirrors(
            environment.kind,
            mirror_index=config.mirror_index,
            custom_mirror=config.custom_mirror,
        )
        if not mirrors:
            print(f"No mirrors available for {environment.kind.value}.")
            return EXIT_INVALID_USAGE

        for position, url in enumerate(mirrors, 1):
            print(f"{position}. {url}")
        return EXIT_SUCCESS
