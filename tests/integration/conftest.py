"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from am2rlauncher.bootstrap.paths import LauncherPaths


@pytest.fixture
def launcher_paths(tmp_path: Path) -> LauncherPaths:
    paths = LauncherPaths(tmp_path / "AM2RLauncher")
    paths.ensure_directories()
    return paths
