"""Argument parser construction for the am2rlauncher CLI.

This module builds the argument parser with subcommands:
- am2rlauncher status       - Show platform, data directory and tool status
- am2rlauncher mirrors      - List autopatcher mirrors in try order
- am2rlauncher open-url     - Open a website in the browser
- am2rlauncher open-folder  - Open a folder (or reveal a file)
- am2rlauncher patch        - Apply an xdelta patch
- am2rlauncher run-jar      - Run a Java archive
"""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show am2rlauncher version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: platform config location).",
    )


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'status' subcommand parser."""
    status_parser = subparsers.add_parser(
        "status",
        help="Show platform, data directory and tool status.",
        description=(
            "Display the detected platform, the resolved data directory, "
            "the config file location and whether java and xdelta3 are available."
        ),
    )
    status_parser.add_argument(
        "--no-probe",
        action="store_true",
        help="Skip running java and xdelta3 to detect them.",
    )


def _build_mirrors_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'mirrors' subcommand parser."""
    subparsers.add_parser(
        "mirrors",
        help="List autopatcher mirrors in the order they are tried.",
    )


def _build_open_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'open-url' and 'open-folder' subcommand parsers."""
    url_parser = subparsers.add_parser(
        "open-url",
        help="Open a website in the default browser.",
    )
    url_parser.add_argument("url", help="URL to open.")

    folder_parser = subparsers.add_parser(
        "open-folder",
        help="Open a folder in the file manager.",
        description=(
            "Open PATH in the file manager, creating it if needed. "
            "With --select, PATH is a file to reveal instead."
        ),
    )
    folder_parser.add_argument("path", help="Folder (or file with --select) to open.")
    folder_parser.add_argument(
        "--select",
        action="store_true",
        help="Treat PATH as a file and select it in its folder.",
    )


def _build_patch_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'patch' subcommand parser."""
    patch_parser = subparsers.add_parser(
        "patch",
        help="Apply an xdelta patch.",
        description=(
            "Apply PATCH to ORIGINAL with xdelta3. Relative paths are resolved "
            "against the launcher data directory. OUTPUT defaults to ORIGINAL."
        ),
    )
    patch_parser.add_argument("original", help="File to patch.")
    patch_parser.add_argument("patch", help="xdelta patch file.")
    patch_parser.add_argument("output", nargs="?", default=None, help="Patched file.")


def _build_run_jar_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'run-jar' subcommand parser."""
    jar_parser = subparsers.add_parser(
        "run-jar",
        help="Run a Java archive and wait for it.",
    )
    jar_parser.add_argument("jar", help="Path to the .jar file.")
    jar_parser.add_argument(
        "jar_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the jar.",
    )
    jar_parser.add_argument(
        "--cwd",
        metavar="DIR",
        type=Path,
        default=None,
        help="Working directory (default: config value, else home directory).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the am2rlauncher CLI.

    Returns:
        Configured ArgumentParser instance with subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="am2rlauncher",
        description="Cross-platform operations of the AM2R launcher.",
        epilog=(
            "Examples:\n"
            "  am2rlauncher status                           # Show environment\n"
            "  am2rlauncher mirrors                          # List mirrors\n"
            "  am2rlauncher open-folder ~/AM2R               # Open a folder\n"
            "  am2rlauncher open-folder --select game.zip    # Reveal a file\n"
            "  am2rlauncher patch data.win data.xdelta       # Patch in place\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands:",
        metavar="COMMAND",
    )

    _build_status_parser(subparsers)
    _build_mirrors_parser(subparsers)
    _build_open_parsers(subparsers)
    _build_patch_parser(subparsers)
    _build_run_jar_parser(subparsers)

    return parser
