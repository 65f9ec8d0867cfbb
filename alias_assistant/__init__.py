"""Alias Assistant: shell alias file management with Gist backup."""

from .app import AliasAssistant
from .constants import VERSION as __version__
from .errors import (
    AliasAssistantError,
    AuthMissingError,
    ConfigMissingError,
    DuplicateAliasError,
    HomeDirUnresolvedError,
    InvalidAliasError,
    PlatformError,
    RemoteError,
    StorageError,
    UnsupportedShellError,
)
from .grammar import AliasCollection, AliasRecord, parse, serialize
from .platform import AppPaths

__all__ = [
    "AliasAssistant",
    "AliasAssistantError",
    "AliasCollection",
    "AliasRecord",
    "AppPaths",
    "AuthMissingError",
    "ConfigMissingError",
    "DuplicateAliasError",
    "HomeDirUnresolvedError",
    "InvalidAliasError",
    "PlatformError",
    "RemoteError",
    "StorageError",
    "UnsupportedShellError",
    "__version__",
    "parse",
    "serialize",
]
