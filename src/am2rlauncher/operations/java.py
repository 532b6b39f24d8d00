"""Running Java archives."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from am2rlauncher.bootstrap.platform import PlatformCapabilities
from am2rlauncher.core.logging import get_logger
from am2rlauncher.core.process import ProcessInvocationSpec, SpawnResult, spawn_and_wait

LOGGER = get_logger(__name__)

Spawner = Callable[[ProcessInvocationSpec], SpawnResult]


class JavaJarRunner:
    """Runs ``java -jar`` and waits for it to finish."""

    def __init__(
        self,
        capabilities: PlatformCapabilities,
        spawner: Spawner = spawn_and_wait,
    ) -> None:
        self._capabilities = capabilities
        self._spawner = spawner

    def run(
        self,
        arguments: Sequence[str] = (),
        working_directory: Optional[Union[str, Path]] = None,
    ) -> None:
        """Run a jar file.

        Args:
            arguments: The jar path followed by its own arguments.
            working_directory: Directory for the java process. Defaults to
                the user's home directory.
        """
        launcher = self._capabilities.java_launcher
        if launcher is None:
            LOGGER.error(f"{self._capabilities.kind.value} has no java process!")
            return

        cwd = Path(working_directory) if working_directory is not None else Path.home()
        executable, *prefix = launcher
        spec = ProcessInvocationSpec(
            executable,
            (*prefix, "-jar", *arguments),
            working_directory=cwd,
        )
        result = self._spawner(spec)
        if not result.started:
            LOGGER.error(f"Could not start {executable}; is Java installed?")
