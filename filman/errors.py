"""Typed failures raised by commands, navigation, and path helpers.

Every handler raises a ``FilmanError`` subclass instead of aborting.
The runtime loop stores ``str(exc)`` as the status-line error message.
"""

from __future__ import annotations

from pathlib import Path


class FilmanError(Exception):
    """Base class for all user-facing filman failures."""


class CommandError(FilmanError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Error executing filman command: {message}")
        self.message = message


class ShellCommandError(FilmanError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Error executing shell command: {message}")
        self.message = message


class CommandParseError(FilmanError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Command parse error: {message}")
        self.message = message


class NoParentError(FilmanError):
    def __init__(self) -> None:
        super().__init__("Directory has no parent")


class ReadDirectoryError(FilmanError):
    """Listing or stat of a directory failed; wraps the underlying ``OSError``."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to read directory {path}: {reason}")
        self.path = path
        self.cause = cause


class FileOverwriteError(FilmanError):
    def __init__(self, name: str) -> None:
        super().__init__(f"This would overwrite an existing file: {name}")
        self.name = name


class UnicodePathError(FilmanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Path is not valid unicode: {str(path)!r}")
        self.path = path


class PathHasNoFilenameError(FilmanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Path has no filename: {path}")
        self.path = path


class EmptyDirectoryError(FilmanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory is empty: {path}")
        self.path = path


class NotDirectoryError(FilmanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Not a directory: {path.name or path}")
        self.path = path


class NoFileSelectedError(FilmanError):
    def __init__(self) -> None:
        super().__init__("No file selected")


class ConfigError(FilmanError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid configuration: {message}")
        self.message = message


__all__ = [
    "FilmanError",
    "CommandError",
    "ShellCommandError",
    "CommandParseError",
    "NoParentError",
    "ReadDirectoryError",
    "FileOverwriteError",
    "UnicodePathError",
    "PathHasNoFilenameError",
    "EmptyDirectoryError",
    "NotDirectoryError",
    "NoFileSelectedError",
    "ConfigError",
]
