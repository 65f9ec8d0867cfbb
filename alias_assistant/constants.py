"""Fixed names shared across Alias Assistant."""

from __future__ import annotations

TOOL_NAME = "Alias-Assistant"
VERSION = "0.1.0"

# ~/.alias-assistant/
APP_DIR_NAME = ".alias-assistant"
ALIAS_FILENAME = "aliases.sh"
SYNC_CONFIG_FILENAME = "gist_config.json"
PREFERENCES_FILENAME = "preferences.yaml"

MANAGED_HEADER = (
    f"# This file is managed by {TOOL_NAME}. Manual edits might be overwritten."
)
ALIAS_PREFIX = "alias "

# GitHub Gist API
GITHUB_API_URL = "https://api.github.com"
GIST_DESCRIPTION = "Alias Assistant - Shell Aliases"
GIST_ACCEPT = "application/vnd.github.v3+json"
USER_AGENT = TOOL_NAME

# Shell rc files keyed by the suffix of $SHELL
SHELL_RC_FILES: dict[str, str] = {
    "bash": ".bashrc",
    "zsh": ".zshrc",
}
