"""Error types raised by Alias Assistant operations.

Every error carries a ``kind`` tag so an embedding application can branch
on the failure without matching message text.
"""

from __future__ import annotations


class AliasAssistantError(Exception):
    """Base class for all Alias Assistant failures."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HomeDirUnresolvedError(AliasAssistantError):
    """The user's home directory could not be determined."""

    kind = "home_dir_unresolved"


class StorageError(AliasAssistantError):
    """Reading or writing a local file failed."""

    kind = "io"


class DuplicateAliasError(AliasAssistantError):
    """An alias with the requested name already exists."""

    kind = "duplicate_name"

    def __init__(self, name: str) -> None:
        super().__init__(f"Alias with that name already exists: {name}")
        self.name = name


class InvalidAliasError(AliasAssistantError):
    """The name or command cannot be written as a single alias line."""

    kind = "invalid_alias"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid alias {name!r}: {reason}")
        self.name = name
        self.reason = reason


class UnsupportedShellError(AliasAssistantError):
    """The user's shell has no known rc file."""

    kind = "unsupported_shell"

    def __init__(self, shell: str) -> None:
        super().__init__(
            "Unsupported shell detected. Only bash and zsh are currently "
            f"supported for auto-configuration (got {shell or 'none'!r})."
        )
        self.shell = shell


class AuthMissingError(AliasAssistantError):
    """A remote operation needs a token and none is stored."""

    kind = "auth_missing"


class ConfigMissingError(AliasAssistantError):
    """A pull needs both a token and a gist id."""

    kind = "config_missing"


class RemoteError(AliasAssistantError):
    """The Gist API request failed.

    ``message`` holds the server's response text verbatim when the server
    answered; ``status_code`` is ``None`` for transport failures.
    """

    kind = "remote"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"GitHub API error ({self.status_code}): {self.message}"


class PlatformError(AliasAssistantError):
    """Clipboard copy or terminal launch failed."""

    kind = "platform"
