"""Applying xdelta patches.

The patcher runs xdelta3 (bundled on Windows, from PATH elsewhere) with the
launcher data directory as working directory. File arguments are passed
relative to it: xdelta on Windows breaks on non-ASCII characters, which
typically come from the user's account name in an absolute path.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Union

from am2rlauncher.bootstrap.paths import LauncherPaths
from am2rlauncher.bootstrap.platform import PlatformCapabilities
from am2rlauncher.bootstrap.validation import XDELTA_EXECUTABLE
from am2rlauncher.core.logging import get_logger
from am2rlauncher.core.process import ProcessInvocationSpec, SpawnResult, spawn_and_wait

LOGGER = get_logger(__name__)

Spawner = Callable[[ProcessInvocationSpec], SpawnResult]

# Suffix of the temporary output used when patching a file in place
IN_PLACE_SUFFIX = "_"


class DeltaPatchApplier:
    """Runs xdelta3 to turn an original file into its patched version.

    Not safe to call concurrently for the same output file.
    """

    def __init__(
        self,
        paths: LauncherPaths,
        capabilities: PlatformCapabilities,
        spawner: Spawner = spawn_and_wait,
    ) -> None:
        self._paths = paths
        self._capabilities = capabilities
        self._spawner = spawner

    @property
    def executable(self) -> str:
        """xdelta binary to invoke on this platform."""
        if self._capabilities.patch_tool_bundled:
            return str(self._paths.bundled_xdelta)
        return XDELTA_EXECUTABLE

    def build_invocation(
        self,
        original_file: Union[str, Path],
        patch_file: Union[str, Path],
        output_file: Union[str, Path],
    ) -> ProcessInvocationSpec:
        """Build the xdelta decode command for the given files."""
        relative = self._paths.relative_to_home
        return ProcessInvocationSpec(
            self.executable,
            (
                "-f",
                "-d",
                "-s",
                relative(original_file),
                relative(patch_file),
                relative(output_file),
            ),
            working_directory=self._paths.home,
        )

    def apply(
        self,
        original_file: Union[str, Path],
        patch_file: Union[str, Path],
        output_file: Union[str, Path],
    ) -> None:
        """Apply ``patch_file`` to ``original_file``, writing ``output_file``.

        Assumes xdelta3 is installed and on PATH, except on Windows where the
        bundled copy is used. xdelta sometimes fails when writing over its own
        source, so in-place patches go through a temporary file that replaces
        the original only if xdelta produced it.

        Relative paths are taken relative to the data directory.
        """
        original = self._paths.resolve(original_file)
        patch = self._paths.resolve(patch_file)
        target = self._paths.resolve(output_file)
        in_place = original == target
        if in_place:
            target = Path(f"{target}{IN_PLACE_SUFFIX}")

        spec = self.build_invocation(original, patch, target)
        LOGGER.info(f"Applying {patch} to {original}")
        result = self._spawner(spec)

        if not result.started:
            LOGGER.error(f"{spec.executable} could not be started.")
        else:
            LOGGER.debug(f"xdelta exited with code {result.exit_code}")

        if not in_place or not target.exists():
            return

        os.replace(target, original)
