"""Directory scanning shared by session queries and the display projection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ReadDirectoryError
from .paths import file_size


@dataclass(frozen=True)
class DirectoryChild:
    """One listing row plus the stat data gathered while scanning."""

    name: str
    path: Path
    is_dir: bool
    size: int | None


def listing_sort_key(child: DirectoryChild) -> tuple[bool, str, str]:
    """Directories first, then case-folded name with raw name as tiebreak."""
    return (not child.is_dir, child.name.casefold(), child.name)


def list_directory_children(directory: Path) -> list[DirectoryChild]:
    """Scan ``directory`` and return every child in display order.

    Raises ``ReadDirectoryError`` when the directory itself cannot be opened.
    Per-entry stat failures only blank that entry's size.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False

                size: int | None = None
                try:
                    size = file_size(directory / entry.name)
                except ReadDirectoryError:
                    pass

                children.append(
                    DirectoryChild(
                        name=entry.name,
                        path=directory / entry.name,
                        is_dir=is_dir,
                        size=size,
                    )
                )
    except OSError as exc:
        raise ReadDirectoryError(directory, exc) from exc

    children.sort(key=listing_sort_key)
    return children


def list_directory(directory: Path) -> list[Path]:
    """Return child paths of ``directory`` in display order."""
    return [child.path for child in list_directory_children(directory)]


__all__ = ["DirectoryChild", "listing_sort_key", "list_directory_children", "list_directory"]
