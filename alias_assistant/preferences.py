"""User preferences for Alias Assistant.

Loads settings from ~/.alias-assistant/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import GIST_DESCRIPTION, GITHUB_API_URL, SHELL_RC_FILES
from .log import logger

_DEFAULT_YAML = """\
# Alias Assistant Preferences
# Delete this file to reset to defaults.
# The GitHub token is not stored here; use `alias-assistant token <value>`.

sync:
  api_url: "https://api.github.com"             # GitHub API (or GitHub Enterprise) base URL
  description: "Alias Assistant - Shell Aliases" # description of the created gist

shell:
  override: ""                   # "bash" or "zsh" to skip $SHELL detection

terminal:
  app: "Terminal"                # macOS terminal application to open
"""


@dataclass
class SyncPreferences:
    """Settings for the Gist backup."""

    api_url: str = GITHUB_API_URL
    description: str = GIST_DESCRIPTION


@dataclass
class ShellPreferences:
    """Settings for shell-rc sourcing."""

    override: str = ""  # Empty means detect from $SHELL


@dataclass
class TerminalPreferences:
    app: str = "Terminal"


@dataclass
class Preferences:
    """Top-level preferences."""

    sync: SyncPreferences = field(default_factory=SyncPreferences)
    shell: ShellPreferences = field(default_factory=ShellPreferences)
    terminal: TerminalPreferences = field(default_factory=TerminalPreferences)


def load_preferences(path: Path) -> Preferences:
    """Load preferences from the YAML file at *path*.

    Falls back to defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.debug("failed to read preferences from %s", path, exc_info=True)
            return prefs
        if not isinstance(data, dict):
            return prefs
        if isinstance(data.get("sync"), dict):
            sdata = data["sync"]
            if sdata.get("api_url"):
                prefs.sync.api_url = str(sdata["api_url"]).rstrip("/")
            if sdata.get("description"):
                prefs.sync.description = str(sdata["description"])
        if isinstance(data.get("shell"), dict):
            override = str(data["shell"].get("override") or "").strip().lower()
            if override in SHELL_RC_FILES:
                prefs.shell.override = override
            elif override:
                logger.debug("ignoring unknown shell override %r", override)
        if isinstance(data.get("terminal"), dict):
            app = data["terminal"].get("app")
            if app:
                prefs.terminal.app = str(app)
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences", exc_info=True)

    return prefs


def save_shell_override(shell: str, path: Path) -> None:
    """Persist the shell override to the preferences file.

    Surgically updates only the override value, preserving the rest of the
    file (including user comments) as-is.
    """
    try:
        if path.exists():
            text = path.read_text(encoding="utf-8")
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        value = f'"{shell}"'
        if re.search(r"^\s+override:", text, re.MULTILINE):
            text = re.sub(
                r"^(\s+override:)\s*(?:\"[^\"]*\"|\S+)?(.*)$",
                rf"\1 {value}\2",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(r"^shell:", text, re.MULTILINE):
            text = re.sub(
                r"^(shell:.*)$",
                rf"\1\n  override: {value}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\nshell:\n  override: {value}\n"

        path.write_text(text, encoding="utf-8")
    except OSError:
        logger.debug("failed to save shell override", exc_info=True)
