"""Patch command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig

from am2rlauncher.bootstrap.validation import ToolAvailabilityProbe, ToolId
from am2rlauncher.cli.commands import Command
from am2rlauncher.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
    EXIT_TOOL_MISSING,
)
from am2rlauncher.core.logging import get_logger
from am2rlauncher.operations.xdelta import DeltaPatchApplier

LOGGER = get_logger(__name__)


class PatchCommand(Command):
    """Applies an xdelta patch inside the data directory."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "patch"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        """Execute the patch command.

        Relative paths are anchored at the data directory. The output
        defaults to the original file (patch in place).

        Returns:
            Exit code.
        """
        paths = environment.paths
        original = paths.resolve(args.original)
        patch_file = paths.resolve(args.patch)
        output = paths.resolve(args.output) if args.output else original

        for required in (original, patch_file):
            if not required.is_file():
                LOGGER.error(f"File not found: {required}")
                return EXIT_INVALID_USAGE

        capabilities = environment.capabilities
        if capabilities.patch_tool_bundled:
            if not paths.bundled_xdelta.exists():
                LOGGER.error(f"Bundled xdelta not found at {paths.bundled_xdelta}")
                return EXIT_TOOL_MISSING
        elif not ToolAvailabilityProbe(capabilities).is_available(ToolId.DELTA_PATCH_TOOL):
            LOGGER.error("xdelta3 is not installed or not on PATH.")
            return EXIT_TOOL_MISSING

        DeltaPatchApplier(paths, capabilities).apply(original, patch_file, output)
        print(f"Patched {output}")
        return EXIT_SUCCESS
