"""Cross-platform abstractions for Alias Assistant.

Detects the runtime platform once at import time.  Storage locations are
resolved into an ``AppPaths`` value and OS-specific side effects
(clipboard, opening a terminal) live behind the ``Platform`` protocol, so
the rest of the package never branches on the operating system itself.

Supported platforms:
  - linux   (native Linux)
  - wsl     (Windows Subsystem for Linux)
  - macos   (macOS / Darwin)
  - windows (native Windows / PowerShell)
"""

from __future__ import annotations

import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .constants import (
    ALIAS_FILENAME,
    APP_DIR_NAME,
    PREFERENCES_FILENAME,
    SYNC_CONFIG_FILENAME,
)
from .errors import HomeDirUnresolvedError, PlatformError
from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

_system = platform.system()  # "Linux", "Darwin", "Windows"

try:
    _uname_release = platform.uname().release.lower()
except OSError:
    _uname_release = ""

IS_WINDOWS = _system == "Windows"
IS_MACOS = _system == "Darwin"
IS_LINUX = _system == "Linux"
IS_WSL = IS_LINUX and "microsoft" in _uname_release

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppPaths:
    """Every file location the application touches.

    Built once at startup and handed to each store.  Tests build one over
    a temporary directory with ``AppPaths.from_home(tmp_path)``.
    """

    home: Path
    app_dir: Path
    alias_file: Path
    sync_config_file: Path
    preferences_file: Path

    @classmethod
    def from_home(cls, home: Path | str | None = None) -> AppPaths:
        """Resolve paths under *home* (the user's home directory by default)."""
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as exc:
                logger.debug("home directory lookup failed", exc_info=True)
                raise HomeDirUnresolvedError(
                    f"Failed to get home directory: {exc}"
                ) from exc
        home = Path(home)
        app_dir = home / APP_DIR_NAME
        return cls(
            home=home,
            app_dir=app_dir,
            alias_file=app_dir / ALIAS_FILENAME,
            sync_config_file=app_dir / SYNC_CONFIG_FILENAME,
            preferences_file=app_dir / PREFERENCES_FILENAME,
        )


# ---------------------------------------------------------------------------
# OS capabilities
# ---------------------------------------------------------------------------


class Platform(Protocol):
    """OS-specific side effects needed by the command surface."""

    name: str

    def copy_to_clipboard(self, text: str) -> None: ...

    def open_terminal(self) -> None: ...


def _pipe_to(cmd: list[str], data: bytes) -> None:
    """Run *cmd* feeding *data* on stdin; raise ``PlatformError`` on failure."""
    try:
        subprocess.run(
            cmd,
            input=data,
            check=True,
            timeout=2,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.SubprocessError, OSError) as exc:
        logger.debug("clipboard via %s failed", cmd[0], exc_info=True)
        raise PlatformError(f"Failed to copy to clipboard: {exc}") from exc


def _spawn(cmd: list[str]) -> None:
    """Start *cmd* detached; raise ``PlatformError`` if it cannot start."""
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        logger.debug("failed to launch %s", cmd[0], exc_info=True)
        raise PlatformError(f"Failed to open terminal: {exc}") from exc


class MacOSPlatform:
    """macOS: pbcopy and a new Terminal window via osascript."""

    name = "macos"

    def __init__(self, terminal_app: str = "Terminal") -> None:
        self.terminal_app = terminal_app

    def copy_to_clipboard(self, text: str) -> None:
        _pipe_to(["pbcopy"], text.encode())

    def open_terminal(self) -> None:
        # "do script" opens a new window instead of raising an existing one
        _spawn(
            [
                "osascript",
                "-e",
                f'tell application "{self.terminal_app}" to do script ""',
            ]
        )


class LinuxPlatform:
    """Linux: wl-copy (Wayland), xclip or xsel; first terminal found on PATH."""

    name = "linux"

    _CLIPBOARD_TOOLS: tuple[list[str], ...] = (
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    )
    _TERMINALS: tuple[str, ...] = (
        "x-terminal-emulator",
        "gnome-terminal",
        "konsole",
        "xfce4-terminal",
        "xterm",
    )

    def copy_to_clipboard(self, text: str) -> None:
        for cmd in self._CLIPBOARD_TOOLS:
            if shutil.which(cmd[0]):
                _pipe_to(cmd, text.encode())
                return
        raise PlatformError(
            "Failed to copy to clipboard: install wl-copy, xclip or xsel"
        )

    def open_terminal(self) -> None:
        for term in self._TERMINALS:
            if shutil.which(term):
                _spawn([term])
                return
        raise PlatformError("Failed to open terminal: no terminal emulator found")


class WSLPlatform:
    """WSL: clip.exe with UTF-16LE encoding; Windows Terminal or cmd.exe."""

    name = "wsl"

    def copy_to_clipboard(self, text: str) -> None:
        if not shutil.which("clip.exe"):
            raise PlatformError("Failed to copy to clipboard: clip.exe not found")
        _pipe_to(["clip.exe"], text.encode("utf-16-le"))

    def open_terminal(self) -> None:
        if shutil.which("wt.exe"):
            _spawn(["wt.exe"])
            return
        _spawn(["cmd.exe", "/c", "start", "cmd.exe"])


class WindowsPlatform:
    """Native Windows: clip.exe (UTF-8 on modern Windows); a new cmd window."""

    name = "windows"

    def copy_to_clipboard(self, text: str) -> None:
        if not shutil.which("clip.exe"):
            raise PlatformError("Failed to copy to clipboard: clip.exe not found")
        _pipe_to(["clip.exe"], text.encode())

    def open_terminal(self) -> None:
        _spawn(["cmd.exe", "/c", "start", "cmd.exe"])


def detect_platform(terminal_app: str = "Terminal") -> Platform:
    """Return the capability implementation for the running OS."""
    if IS_WSL:
        return WSLPlatform()
    if IS_WINDOWS:
        return WindowsPlatform()
    if IS_MACOS:
        return MacOSPlatform(terminal_app=terminal_app)
    return LinuxPlatform()
