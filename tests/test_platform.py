"""Tests for AppPaths and the platform capability variants."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from alias_assistant import platform as plat
from alias_assistant.errors import HomeDirUnresolvedError, PlatformError
from alias_assistant.platform import (
    AppPaths,
    LinuxPlatform,
    MacOSPlatform,
    WindowsPlatform,
    WSLPlatform,
    detect_platform,
)


class TestAppPaths:
    def test_layout(self, tmp_path):
        paths = AppPaths.from_home(tmp_path)
        assert paths.home == tmp_path
        assert paths.app_dir == tmp_path / ".alias-assistant"
        assert paths.alias_file == tmp_path / ".alias-assistant" / "aliases.sh"
        assert paths.sync_config_file.name == "gist_config.json"
        assert paths.preferences_file.name == "preferences.yaml"

    def test_does_not_create_directories(self, tmp_path):
        AppPaths.from_home(tmp_path)
        assert not (tmp_path / ".alias-assistant").exists()

    def test_accepts_str(self, tmp_path):
        assert AppPaths.from_home(str(tmp_path)).home == tmp_path

    def test_defaults_to_user_home(self):
        fake_home = Path("/home/someone")
        with patch.object(Path, "home", return_value=fake_home):
            assert AppPaths.from_home().home == fake_home

    def test_unresolvable_home(self):
        with patch.object(Path, "home", side_effect=RuntimeError("no home")):
            with pytest.raises(HomeDirUnresolvedError) as exc_info:
                AppPaths.from_home()
        assert exc_info.value.kind == "home_dir_unresolved"


# ---------------------------------------------------------------------------
# Capability variants
# ---------------------------------------------------------------------------


def _which_only(*available: str):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class TestMacOSPlatform:
    def test_copy_uses_pbcopy(self):
        with patch.object(plat.subprocess, "run") as run:
            MacOSPlatform().copy_to_clipboard("ll")
        assert run.call_args.args[0] == ["pbcopy"]
        assert run.call_args.kwargs["input"] == b"ll"

    def test_copy_failure_raises(self):
        err = subprocess.CalledProcessError(1, ["pbcopy"])
        with patch.object(plat.subprocess, "run", side_effect=err):
            with pytest.raises(PlatformError, match="clipboard"):
                MacOSPlatform().copy_to_clipboard("ll")

    def test_open_terminal_runs_osascript(self):
        with patch.object(plat.subprocess, "Popen") as popen:
            MacOSPlatform(terminal_app="iTerm").open_terminal()
        cmd = popen.call_args.args[0]
        assert cmd[0] == "osascript"
        assert cmd[-1] == 'tell application "iTerm" to do script ""'

    def test_open_terminal_failure_raises(self):
        with patch.object(plat.subprocess, "Popen", side_effect=OSError("nope")):
            with pytest.raises(PlatformError, match="terminal"):
                MacOSPlatform().open_terminal()


class TestLinuxPlatform:
    def test_prefers_first_available_tool(self):
        with (
            patch.object(plat.shutil, "which", side_effect=_which_only("xclip", "xsel")),
            patch.object(plat.subprocess, "run") as run,
        ):
            LinuxPlatform().copy_to_clipboard("gs")
        assert run.call_args.args[0] == ["xclip", "-selection", "clipboard"]

    def test_no_tool_raises(self):
        with patch.object(plat.shutil, "which", return_value=None):
            with pytest.raises(PlatformError):
                LinuxPlatform().copy_to_clipboard("gs")

    def test_open_terminal(self):
        with (
            patch.object(plat.shutil, "which", side_effect=_which_only("xterm")),
            patch.object(plat.subprocess, "Popen") as popen,
        ):
            LinuxPlatform().open_terminal()
        assert popen.call_args.args[0] == ["xterm"]

    def test_no_terminal_raises(self):
        with patch.object(plat.shutil, "which", return_value=None):
            with pytest.raises(PlatformError):
                LinuxPlatform().open_terminal()


class TestWindowsVariants:
    def test_wsl_encodes_utf16(self):
        with (
            patch.object(plat.shutil, "which", side_effect=_which_only("clip.exe")),
            patch.object(plat.subprocess, "run") as run,
        ):
            WSLPlatform().copy_to_clipboard("ll")
        assert run.call_args.kwargs["input"] == "ll".encode("utf-16-le")

    def test_windows_missing_clip_raises(self):
        with patch.object(plat.shutil, "which", return_value=None):
            with pytest.raises(PlatformError):
                WindowsPlatform().copy_to_clipboard("ll")

    def test_wsl_prefers_windows_terminal(self):
        with (
            patch.object(plat.shutil, "which", side_effect=_which_only("wt.exe")),
            patch.object(plat.subprocess, "Popen") as popen,
        ):
            WSLPlatform().open_terminal()
        assert popen.call_args.args[0] == ["wt.exe"]


class TestDetectPlatform:
    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ({"IS_WSL": True}, WSLPlatform),
            ({"IS_WINDOWS": True}, WindowsPlatform),
            ({"IS_MACOS": True}, MacOSPlatform),
            ({}, LinuxPlatform),
        ],
    )
    def test_selects_variant(self, monkeypatch, flags, expected):
        for name in ("IS_WSL", "IS_WINDOWS", "IS_MACOS"):
            monkeypatch.setattr(plat, name, flags.get(name, False))
        assert isinstance(detect_platform(), expected)

    def test_terminal_app_passed_to_macos(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WSL", False)
        monkeypatch.setattr(plat, "IS_WINDOWS", False)
        monkeypatch.setattr(plat, "IS_MACOS", True)
        p = detect_platform(terminal_app="iTerm")
        assert isinstance(p, MacOSPlatform)
        assert p.terminal_app == "iTerm"
