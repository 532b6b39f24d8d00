"""Start-up snapshot of the platform and data directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from am2rlauncher.bootstrap.paths import (
    DataPathProvenance,
    LauncherPaths,
    ResolvedDataPath,
    get_data_path,
)
from am2rlauncher.bootstrap.platform import (
    PlatformCapabilities,
    PlatformKind,
    capabilities_for,
    get_platform_kind,
)


@dataclass(frozen=True)
class LauncherEnvironment:
    """Immutable platform and data directory values handed to components.

    Attributes:
        capabilities: How external operations run on this platform.
        data_path: The resolved data directory and its provenance.
        paths: Layout beneath the data directory.
    """

    capabilities: PlatformCapabilities
    data_path: ResolvedDataPath
    paths: LauncherPaths

    @property
    def kind(self) -> PlatformKind:
        return self.capabilities.kind

    @classmethod
    def detect(cls) -> "LauncherEnvironment":
        """Build the environment for the running process."""
        data_path = get_data_path()
        return cls(
            capabilities=capabilities_for(get_platform_kind()),
            data_path=data_path,
            paths=LauncherPaths(data_path.path),
        )

    @classmethod
    def from_data_dir(
        cls,
        kind: PlatformKind,
        data_dir: Path,
        provenance: DataPathProvenance = DataPathProvenance.ENV_OVERRIDE,
    ) -> "LauncherEnvironment":
        """Build an environment around an explicit data directory.

        A directory chosen by the caller counts as an override unless
        ``provenance`` says otherwise.
        """
        return cls(
            capabilities=capabilities_for(kind),
            data_path=ResolvedDataPath(data_dir, provenance),
            paths=LauncherPaths(data_dir),
        )
