"""Tests for platform detection functionality."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from am2rlauncher.bootstrap.platform import (
    DataDirStrategy,
    PlatformCapabilities,
    PlatformKind,
    capabilities_for,
    detect_platform,
    get_capabilities,
    get_platform_kind,
)


class TestDetectPlatform:
    """Tests for OS classification."""

    def test_detect_windows(self) -> None:
        assert detect_platform("Windows") == PlatformKind.WINDOWS

    def test_detect_linux(self) -> None:
        assert detect_platform("Linux") == PlatformKind.LINUX

    def test_detect_darwin_is_mac(self) -> None:
        assert detect_platform("Darwin") == PlatformKind.MAC

    def test_detect_unknown_is_other(self) -> None:
        assert detect_platform("FreeBSD") == PlatformKind.OTHER

    def test_detect_empty_is_other(self) -> None:
        assert detect_platform("") == PlatformKind.OTHER

    def test_detect_uses_platform_system(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert detect_platform() == PlatformKind.MAC


class TestPlatformKind:
    """Tests for PlatformKind helpers."""

    @pytest.mark.parametrize("kind", [PlatformKind.LINUX, PlatformKind.MAC])
    def test_unix_kinds(self, kind: PlatformKind) -> None:
        assert kind.is_unix is True

    @pytest.mark.parametrize("kind", [PlatformKind.WINDOWS, PlatformKind.OTHER])
    def test_non_unix_kinds(self, kind: PlatformKind) -> None:
        assert kind.is_unix is False


class TestGetPlatformKind:
    """Tests for the cached platform lookup."""

    def test_result_is_cached(self) -> None:
        with patch("platform.system", return_value="Linux") as mock_system:
            assert get_platform_kind() == PlatformKind.LINUX
            assert get_platform_kind() == PlatformKind.LINUX
            mock_system.assert_called_once()

    def test_later_changes_not_observed(self) -> None:
        with patch("platform.system", return_value="Windows"):
            first = get_platform_kind()
        with patch("platform.system", return_value="Linux"):
            assert get_platform_kind() == first == PlatformKind.WINDOWS

    def test_get_capabilities_matches_kind(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert get_capabilities().kind == PlatformKind.MAC


class TestCapabilities:
    """Tests for the per-platform capability table."""

    def test_every_kind_has_a_table(self) -> None:
        for kind in PlatformKind:
            caps = capabilities_for(kind)
            assert isinstance(caps, PlatformCapabilities)
            assert caps.kind == kind

    def test_windows(self) -> None:
        caps = capabilities_for(PlatformKind.WINDOWS)
        assert caps.opens_urls_with_shell is True
        assert caps.url_opener is None
        assert caps.file_manager == "explorer.exe"
        assert caps.reveal_arguments == ("/select,",)
        assert caps.java_launcher == ("cmd", "/C", "java")
        assert caps.java_probe == ("cmd.exe", "/C", "java", "-version")
        assert caps.data_dir_strategy == DataDirStrategy.EXECUTABLE_DIR
        assert caps.patch_tool_bundled is True

    def test_linux(self) -> None:
        caps = capabilities_for(PlatformKind.LINUX)
        assert caps.opens_urls_with_shell is False
        assert caps.url_opener == ("xdg-open",)
        assert caps.file_manager == "xdg-open"
        assert caps.reveal_arguments is None
        assert caps.java_launcher == ("java",)
        assert caps.java_probe == ("java", "-version")
        assert caps.data_dir_strategy == DataDirStrategy.XDG_DATA
        assert caps.patch_tool_bundled is False

    def test_mac(self) -> None:
        caps = capabilities_for(PlatformKind.MAC)
        assert caps.url_opener == ("open",)
        assert caps.file_manager == "open"
        assert caps.reveal_arguments == ("-R",)
        assert caps.data_dir_strategy == DataDirStrategy.APPLICATION_SUPPORT

    def test_other_has_no_openers(self) -> None:
        caps = capabilities_for(PlatformKind.OTHER)
        assert caps.url_opener is None
        assert caps.file_manager is None
        assert caps.java_launcher is None
        assert caps.java_probe is None
        assert caps.opens_urls_with_shell is False
        assert caps.data_dir_strategy == DataDirStrategy.NONE

    def test_table_is_immutable(self) -> None:
        caps = capabilities_for(PlatformKind.LINUX)
        with pytest.raises(AttributeError):
            caps.file_manager = "nautilus"  # type: ignore[misc]
