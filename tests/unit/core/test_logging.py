"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

from am2rlauncher.core.logging import add_log_file, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging level precedence."""

    def _level_for(self, **flags) -> int:
        with patch("am2rlauncher.core.logging.logging.basicConfig") as mock_config:
            configure_logging(**flags)
        return mock_config.call_args.kwargs["level"]

    def test_default_is_warning(self) -> None:
        assert self._level_for() == logging.WARNING

    def test_verbose_is_info(self) -> None:
        assert self._level_for(verbose=True) == logging.INFO

    def test_debug_is_debug(self) -> None:
        assert self._level_for(debug=True, verbose=True) == logging.DEBUG

    def test_quiet_wins(self) -> None:
        assert self._level_for(quiet=True, debug=True) == logging.ERROR


class TestAddLogFile:
    """Tests for add_log_file."""

    def test_writes_records_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "Logs" / "AM2RLauncher.log"
        handler = add_log_file(log_file)
        try:
            assert handler is not None
            get_logger("am2rlauncher.test").error("patch failed")
            handler.flush()
            assert "patch failed" in log_file.read_text(encoding="utf-8")
        finally:
            logging.getLogger().removeHandler(handler)
            handler.close()

    def test_unwritable_location_is_ignored(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        assert add_log_file(blocker / "Logs" / "x.log") is None


def test_get_logger_names() -> None:
    assert get_logger("am2rlauncher.x").name == "am2rlauncher.x"
