"""Tool availability checks for the launcher.

Detects whether the external command-line tools the launcher relies on are
installed by running their version query. A missing tool is an ordinary
``False``, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from am2rlauncher.bootstrap.platform import PlatformCapabilities
from am2rlauncher.core.logging import get_logger
from am2rlauncher.core.process import ProcessInvocationSpec, SpawnResult, spawn_and_wait

LOGGER = get_logger(__name__)

Spawner = Callable[[ProcessInvocationSpec], SpawnResult]

XDELTA_EXECUTABLE = "xdelta3"


class ToolId(str, Enum):
    """External tools the launcher can probe for."""

    JAVA_RUNTIME = "java"
    DELTA_PATCH_TOOL = "xdelta"


def probe_command(
    tool: ToolId, capabilities: PlatformCapabilities
) -> Optional[ProcessInvocationSpec]:
    """Build the version query used to detect ``tool``.

    Returns:
        The invocation to run, or None if the platform has no way to run it.
    """
    if tool == ToolId.DELTA_PATCH_TOOL:
        return ProcessInvocationSpec(XDELTA_EXECUTABLE, ("-V",))

    if capabilities.java_probe is None:
        LOGGER.error(f"{capabilities.kind.value} has no java process/arguments")
        return None
    executable, *arguments = capabilities.java_probe
    return ProcessInvocationSpec(executable, tuple(arguments))


class ToolAvailabilityProbe:
    """Checks whether external tools are installed and on PATH."""

    def __init__(
        self,
        capabilities: PlatformCapabilities,
        spawner: Spawner = spawn_and_wait,
    ) -> None:
        self._capabilities = capabilities
        self._spawner = spawner

    def is_available(self, tool: ToolId) -> bool:
        """Return True iff the tool's version query starts and exits with 0."""
        spec = probe_command(tool, self._capabilities)
        if spec is None:
            return False

        result = self._spawner(spec)
        if not result.started:
            LOGGER.error(f"{tool.value} is not installed or not on PATH.")
            return False
        if result.exit_code != 0:
            LOGGER.error(f"{tool.value} version query exited with code {result.exit_code}.")
            return False
        return True


@dataclass
class ToolValidationResult:
    """Availability of every tool the launcher uses.

    Attributes:
        java: Java runtime found.
        xdelta: xdelta3 found.
    """

    java: bool
    xdelta: bool

    def all_valid(self) -> bool:
        """Check if all tools are available."""
        return self.java and self.xdelta

    def missing_tools(self) -> List[str]:
        """Return list of tools that are not available."""
        missing = []
        if not self.java:
            missing.append(ToolId.JAVA_RUNTIME.value)
        if not self.xdelta:
            missing.append(ToolId.DELTA_PATCH_TOOL.value)
        return missing

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            ToolId.JAVA_RUNTIME.value: "present" if self.java else "missing",
            ToolId.DELTA_PATCH_TOOL.value: "present" if self.xdelta else "missing",
        }


def validate_tools(probe: ToolAvailabilityProbe) -> ToolValidationResult:
    """Probe every tool the launcher uses."""
    LOGGER.debug("Validating external tools...")

    result = ToolValidationResult(
        java=probe.is_available(ToolId.JAVA_RUNTIME),
        xdelta=probe.is_available(ToolId.DELTA_PATCH_TOOL),
    )

    if result.all_valid():
        LOGGER.debug("All external tools are available.")
    else:
        LOGGER.debug(f"Missing tools: {result.missing_tools()}")

    return result
