"""Tests for the process spawning primitives."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from am2rlauncher.core.process import (
    ProcessInvocationSpec,
    SpawnResult,
    open_with_shell,
    spawn_and_wait,
    start_process,
)


class TestProcessInvocationSpec:
    """Tests for ProcessInvocationSpec."""

    def test_command(self) -> None:
        spec = ProcessInvocationSpec("xdelta3", ("-f", "-d"))
        assert spec.command == ["xdelta3", "-f", "-d"]

    def test_defaults(self) -> None:
        spec = ProcessInvocationSpec("java")
        assert spec.arguments == ()
        assert spec.working_directory is None
        assert spec.hidden is True


class TestSpawnResult:
    """Tests for SpawnResult."""

    def test_not_found(self) -> None:
        result = SpawnResult.not_found()
        assert result.started is False
        assert result.exit_code is None
        assert result.succeeded is False

    def test_succeeded(self) -> None:
        assert SpawnResult(started=True, exit_code=0).succeeded is True
        assert SpawnResult(started=True, exit_code=2).succeeded is False


class TestSpawnAndWait:
    """Tests for spawn_and_wait."""

    def test_returns_exit_code(self) -> None:
        spec = ProcessInvocationSpec(sys.executable, ("-c", "import sys; sys.exit(3)"))
        assert spawn_and_wait(spec) == SpawnResult(started=True, exit_code=3)

    def test_zero_exit(self) -> None:
        spec = ProcessInvocationSpec(sys.executable, ("-c", "pass"))
        assert spawn_and_wait(spec).succeeded is True

    def test_runs_in_working_directory(self, tmp_path: Path) -> None:
        spec = ProcessInvocationSpec(
            sys.executable,
            ("-c", "open('marker.txt', 'w').write('here')"),
            working_directory=tmp_path,
        )
        spawn_and_wait(spec)
        assert (tmp_path / "marker.txt").read_text() == "here"

    def test_missing_executable_is_not_found(self) -> None:
        spec = ProcessInvocationSpec("am2rlauncher-no-such-tool-xyz", ("-V",))
        assert spawn_and_wait(spec) == SpawnResult.not_found()

    def test_permission_error_propagates(self) -> None:
        with patch(
            "am2rlauncher.core.process.subprocess.Popen",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(PermissionError):
                spawn_and_wait(ProcessInvocationSpec("xdelta3"))

    def test_hidden_discards_output(self) -> None:
        proc = MagicMock()
        proc.wait.return_value = 0
        with patch("am2rlauncher.core.process.subprocess.Popen", return_value=proc) as mock_popen:
            spawn_and_wait(ProcessInvocationSpec("java", ("-version",), working_directory=Path("/data")))

        args, kwargs = mock_popen.call_args
        assert args[0] == ["java", "-version"]
        assert kwargs["cwd"] == str(Path("/data"))
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL
        proc.wait.assert_called_once_with()


class TestStartProcess:
    """Tests for start_process."""

    def test_visible_process_keeps_output(self) -> None:
        with patch("am2rlauncher.core.process.subprocess.Popen") as mock_popen:
            start_process(ProcessInvocationSpec("xdg-open", ("/tmp",), hidden=False))

        args, kwargs = mock_popen.call_args
        assert args[0] == ["xdg-open", "/tmp"]
        assert "stdout" not in kwargs
        assert "cwd" not in kwargs

    def test_does_not_wait(self) -> None:
        with patch("am2rlauncher.core.process.subprocess.Popen") as mock_popen:
            start_process(ProcessInvocationSpec("open", ("x",)))
        mock_popen.return_value.wait.assert_not_called()

    def test_not_found_propagates(self) -> None:
        with pytest.raises(FileNotFoundError):
            start_process(ProcessInvocationSpec("am2rlauncher-no-such-tool-xyz"))


class TestOpenWithShell:
    """Tests for open_with_shell."""

    def test_delegates_to_startfile(self) -> None:
        with patch("am2rlauncher.core.process.os.startfile", create=True) as mock_startfile:
            open_with_shell("https://example.org")
        mock_startfile.assert_called_once_with("https://example.org")
