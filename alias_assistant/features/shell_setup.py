"""Hook the alias file into the user's shell startup file."""

from __future__ import annotations

import os
from pathlib import Path

from ..constants import SHELL_RC_FILES
from ..errors import StorageError, UnsupportedShellError
from ..log import logger
from ..platform import AppPaths


def rc_file_for_shell(home: Path, shell: str) -> Path:
    """Return the rc file for *shell* (a name or a path such as ``/bin/zsh``)."""
    for suffix, rc_name in SHELL_RC_FILES.items():
        if shell.endswith(suffix):
            return home / rc_name
    raise UnsupportedShellError(shell)


def source_line(alias_file: Path) -> str:
    return f'\nsource "{alias_file}"'


def ensure_sourcing_is_setup(paths: AppPaths, shell: str | None = None) -> bool:
    """Append a ``source`` line for the alias file to the shell rc file.

    *shell* defaults to ``$SHELL``.  Does nothing if the line is already
    present.  Returns True if the rc file was changed.
    """
    if shell is None:
        shell = os.environ.get("SHELL", "")
    rc_file = rc_file_for_shell(paths.home, shell)
    line = source_line(paths.alias_file)

    try:
        content = rc_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        content = ""
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("failed to read %s", rc_file, exc_info=True)
        raise StorageError(f"Failed to open user config file: {exc}") from exc

    if line in content:
        return False

    try:
        with rc_file.open("a", encoding="utf-8") as f:
            f.write(line)
    except OSError as exc:
        logger.debug("failed to append to %s", rc_file, exc_info=True)
        raise StorageError(f"Failed to write to user config file: {exc}") from exc

    logger.info("added alias sourcing to %s", rc_file)
    return True
