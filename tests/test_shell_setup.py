"""Tests for shell rc-file sourcing."""

from __future__ import annotations

import pytest

from alias_assistant.errors import StorageError, UnsupportedShellError
from alias_assistant.features.shell_setup import (
    ensure_sourcing_is_setup,
    rc_file_for_shell,
    source_line,
)


class TestRcFileForShell:
    @pytest.mark.parametrize(
        ("shell", "rc_name"),
        [
            ("/bin/bash", ".bashrc"),
            ("/usr/local/bin/bash", ".bashrc"),
            ("bash", ".bashrc"),
            ("/bin/zsh", ".zshrc"),
            ("/opt/homebrew/bin/zsh", ".zshrc"),
        ],
    )
    def test_known_shells(self, tmp_path, shell, rc_name):
        assert rc_file_for_shell(tmp_path, shell) == tmp_path / rc_name

    @pytest.mark.parametrize("shell", ["/usr/bin/fish", "/bin/sh", ""])
    def test_unsupported_shell(self, tmp_path, shell):
        with pytest.raises(UnsupportedShellError) as exc_info:
            rc_file_for_shell(tmp_path, shell)
        assert exc_info.value.kind == "unsupported_shell"
        assert exc_info.value.shell == shell


class TestEnsureSourcingIsSetup:
    def test_creates_rc_file(self, paths):
        assert ensure_sourcing_is_setup(paths, "/bin/zsh") is True
        rc = paths.home / ".zshrc"
        assert rc.read_text() == f'\nsource "{paths.alias_file}"'

    def test_appends_to_existing_rc(self, paths):
        rc = paths.home / ".bashrc"
        rc.write_text("export EDITOR=vim\n")
        ensure_sourcing_is_setup(paths, "/bin/bash")
        assert rc.read_text() == (
            f'export EDITOR=vim\n\nsource "{paths.alias_file}"'
        )

    def test_idempotent(self, paths):
        assert ensure_sourcing_is_setup(paths, "/bin/bash") is True
        first = (paths.home / ".bashrc").read_text()
        assert ensure_sourcing_is_setup(paths, "/bin/bash") is False
        assert (paths.home / ".bashrc").read_text() == first

    def test_uses_shell_env_by_default(self, paths, monkeypatch):
        monkeypatch.setenv("SHELL", "/usr/bin/zsh")
        ensure_sourcing_is_setup(paths)
        assert (paths.home / ".zshrc").exists()
        assert not (paths.home / ".bashrc").exists()

    def test_unsupported_shell_writes_nothing(self, paths, monkeypatch):
        monkeypatch.setenv("SHELL", "/usr/bin/fish")
        with pytest.raises(UnsupportedShellError):
            ensure_sourcing_is_setup(paths)
        assert list(paths.home.iterdir()) == []

    def test_unreadable_rc_raises_storage_error(self, paths):
        (paths.home / ".bashrc").mkdir()
        with pytest.raises(StorageError):
            ensure_sourcing_is_setup(paths, "bash")

    def test_source_line_quotes_path(self, paths):
        assert source_line(paths.alias_file) == f'\nsource "{paths.alias_file}"'
