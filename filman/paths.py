"""Free-function helpers over ``pathlib.Path``.

Names that cannot round-trip as text (undecodable bytes smuggled in as
surrogate escapes) fail with ``UnicodePathError`` instead of leaking into
command strings or the display.
"""

from __future__ import annotations

from pathlib import Path

import humanize

from .errors import PathHasNoFilenameError, ReadDirectoryError, UnicodePathError


def _require_text(text: str, path: Path) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnicodePathError(path) from exc
    return text


def filename(path: Path) -> str:
    """Return the last path component as text."""
    name = path.name
    if not name:
        raise PathHasNoFilenameError(path)
    return _require_text(name, path)


def full_path_str(path: Path) -> str:
    """Return the whole path as text."""
    return _require_text(str(path), path)


def file_size(path: Path) -> int:
    """Return ``st_size`` for ``path`` without following a final symlink."""
    try:
        return int(path.lstat().st_size)
    except OSError as exc:
        raise ReadDirectoryError(path, exc) from exc


def human_size(num_bytes: int | None) -> str:
    """Format a byte count for the file pane; unknown sizes render blank."""
    if num_bytes is None:
        return ""
    return humanize.naturalsize(num_bytes, binary=True)


__all__ = ["filename", "full_path_str", "file_size", "human_size"]
