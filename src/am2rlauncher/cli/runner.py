"""CLI runner orchestration.

This module handles command dispatch and execution for the am2rlauncher CLI.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from am2rlauncher.bootstrap.environment import LauncherEnvironment
from am2rlauncher.cli.arguments import build_parser
from am2rlauncher.cli.commands import (
    Command,
    MirrorsCommand,
    OpenFolderCommand,
    OpenUrlCommand,
    PatchCommand,
    RunJarCommand,
    StatusCommand,
)
from am2rlauncher.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
    EXIT_TOOL_ERROR,
)
from am2rlauncher.config import load_config
from am2rlauncher.config.loader import ConfigError
from am2rlauncher.core.logging import add_log_file, configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get am2rlauncher version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("am2rlauncher")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from am2rlauncher import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self, environment: Optional[LauncherEnvironment] = None) -> None:
        """Initialize CLIRunner with parser and commands.

        Args:
            environment: Platform and data directory to use. Detected on
                first run when omitted.
        """
        self.parser = build_parser()
        self._version = get_version()
        self._environment = environment
        self.commands: Dict[str, Command] = {
            command.name: command
            for command in (
                StatusCommand(version=self._version),
                MirrorsCommand(),
                OpenUrlCommand(),
                OpenFolderCommand(),
                PatchCommand(),
                RunJarCommand(),
            )
        }

    @property
    def environment(self) -> LauncherEnvironment:
        """The launcher environment, detected once."""
        if self._environment is None:
            self._environment = LauncherEnvironment.detect()
        return self._environment

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits on --help (0) and on usage errors (2)
            return EXIT_SUCCESS if not e.code else EXIT_INVALID_USAGE

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = self.commands.get(getattr(args, "command", None) or "")
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        environment = self.environment
        try:
            config = load_config(args.config, environment=environment)
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        if config.log_to_file:
            add_log_file(environment.paths.log_file)

        try:
            return command.execute(args, environment, config)
        except OSError as e:
            if args.debug:
                import traceback
                traceback.print_exc()
            LOGGER.error(f"{command.name} failed: {e}")
            return EXIT_TOOL_ERROR
