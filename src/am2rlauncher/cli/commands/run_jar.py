"""run-jar command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am2rlauncher.bootstrap.environment import LauncherEnvironment
    from am2rlauncher.config.models import LauncherConfig

from am2rlauncher.bootstrap.validation import ToolAvailabilityProbe, ToolId
from am2rlauncher.cli.commands import Command
from am2rlauncher.cli.exit_codes import EXIT_SUCCESS, EXIT_TOOL_MISSING
from am2rlauncher.core.logging import get_logger
from am2rlauncher.operations.java import JavaJarRunner

LOGGER = get_logger(__name__)


class RunJarCommand(Command):
    """Runs a Java archive once Java is confirmed to be installed."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "run-jar"

    def execute(
        self,
        args: Namespace,
        environment: "LauncherEnvironment",
        config: "LauncherConfig",
    ) -> int:
        capabilities = environment.capabilities
        if not ToolAvailabilityProbe(capabilities).is_available(ToolId.JAVA_RUNTIME):
            LOGGER.error("Java is not installed or not on PATH.")
            return EXIT_TOOL_MISSING

        cwd = args.cwd if args.cwd is not None else config.java_working_directory
        JavaJarRunner(capabilities).run([args.jar, *args.jar_args], working_directory=cwd)
        return EXIT_SUCCESS
