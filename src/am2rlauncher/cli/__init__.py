"""Command-line interface for the launcher platform layer."""

from __future__ import annotations

from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Console script entry point."""
    from am2rlauncher.cli.runner import CLIRunner

    return CLIRunner().run(argv)
