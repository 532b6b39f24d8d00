"""Shared fixtures for am2rlauncher tests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from am2rlauncher.bootstrap.paths import get_data_path
from am2rlauncher.bootstrap.platform import get_platform_kind
from am2rlauncher.core.process import ProcessInvocationSpec, SpawnResult


class RecordingSpawner:
    """Stands in for spawn_and_wait / start_process and records every call."""

    def __init__(self, result: Optional[SpawnResult] = None) -> None:
        self.result = result if result is not None else SpawnResult(started=True, exit_code=0)
        self.calls: List[ProcessInvocationSpec] = []
        self.on_spawn = None

    def __call__(self, spec: ProcessInvocationSpec) -> SpawnResult:
        self.calls.append(spec)
        if self.on_spawn is not None:
            self.on_spawn(spec)
        return self.result

    @property
    def last(self) -> ProcessInvocationSpec:
        return self.calls[-1]


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def _clear_process_caches():
    """Platform and data directory are cached per process; reset between tests."""
    get_platform_kind.cache_clear()
    get_data_path.cache_clear()
    yield
    get_platform_kind.cache_clear()
    get_data_path.cache_clear()
