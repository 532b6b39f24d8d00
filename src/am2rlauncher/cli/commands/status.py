"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig

from am2rlauncher.bootstrap.paths import launcher_config_file
from am2rlauncher.bootstrap.validation import (
    ToolAvailabilityProbe,
    ToolId,
    validate_tools,
)
from am2rlauncher.cli.commands import Command
from am2rlauncher.cli.exit_codes import EXIT_SUCCESS


class StatusCommand(Command):
    """Shows platform, data directory and external tool status."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current am2rlauncher version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        data_path = environment.data_path
        config_file = launcher_config_file(environment.kind, data_path.path)

        print(f"am2rlauncher version: {self._version}")
        print(f"Platform: {environment.kind.value}")
        print(f"Data directory: {data_path.path} ({data_path.provenance.value})")
        print(f"Config file: {config_file if config_file is not None else '(none)'}")
        print()

        if getattr(args, "no_probe", False):
            return EXIT_SUCCESS

        result = validate_tools(ToolAvailabilityProbe(environment.capabilities))
        print("External tools:")
        for tool, status in result.to_dict().items():
            if (
                tool == ToolId.DELTA_PATCH_TOOL.value
                and environment.capabilities.patch_tool_bundled
            ):
                bundled = environment.paths.bundled_xdelta
                status = "bundled" if bundled.exists() else f"bundled (not found at {bundled})"
            print(f"  {tool}: {status}")

        return EXIT_SUCCESS
