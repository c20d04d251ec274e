"""Central mutable session record and its derived queries.

One ``SessionState`` lives for the whole run. Listings are never cached:
every query re-reads the filesystem, and cursors are clamped against the
live listing at read time rather than when they are stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import NoFileSelectedError
from .fs import list_directory
from .modes import Mode, NormalMode
from .paths import filename
from .preview import PREVIEW_MAX_BYTES, load_preview


def clamp_cursor(index: int, length: int) -> int:
    """Clamp ``index`` into ``[0, length)``; empty listings clamp to 0."""
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


@dataclass
class SessionState:
    working_directory: Path
    cursor_by_directory: dict[Path, int] = field(default_factory=dict)
    mode: Mode = field(default_factory=NormalMode)
    multi_select: set[Path] = field(default_factory=set)
    yank_buffer: list[Path] = field(default_factory=list)
    last_error: str | None = None
    preview_contents: str | None = None

    @classmethod
    def at(cls, directory: Path) -> SessionState:
        """Create a session rooted at ``directory`` with the cursor on row 0."""
        working_directory = directory.resolve()
        return cls(
            working_directory=working_directory,
            cursor_by_directory={working_directory: 0},
        )

    def resolve(self, name: str) -> Path:
        """Resolve a command argument against the working directory."""
        return self.working_directory / name

    def listing(self, directory: Path | None = None) -> list[Path]:
        return list_directory(self.working_directory if directory is None else directory)

    def parent_listing(self) -> list[Path]:
        parent = self.working_directory.parent
        if parent == self.working_directory:
            return []
        return self.listing(parent)

    def cursor_index(self, directory: Path | None = None) -> int:
        """Return the remembered cursor for ``directory`` clamped to its listing."""
        target = self.working_directory if directory is None else directory
        return clamp_cursor(self.cursor_by_directory.get(target, 0), len(self.listing(target)))

    def set_cursor(self, index: int, directory: Path | None = None) -> None:
        target = self.working_directory if directory is None else directory
        self.cursor_by_directory[target] = index

    def selected_path(self) -> Path | None:
        files = self.listing()
        if not files:
            return None
        index = clamp_cursor(self.cursor_by_directory.get(self.working_directory, 0), len(files))
        return files[index]

    def selected_filename(self) -> str | None:
        selected = self.selected_path()
        if selected is None:
            return None
        return filename(selected)

    def selected_index_in_parent(self) -> int | None:
        try:
            return self.parent_listing().index(self.working_directory)
        except ValueError:
            return None

    def multi_select_in_directory(self) -> list[Path]:
        """Multi-selected paths that live directly in the working directory."""
        return sorted(p for p in self.multi_select if p.parent == self.working_directory)

    def multi_select_or_selected(self) -> list[Path]:
        """Return the local multi-selection, else the single current selection.

        Raises ``NoFileSelectedError`` when neither exists.
        """
        local = self.multi_select_in_directory()
        if local:
            return local
        selected = self.selected_path()
        if selected is None:
            raise NoFileSelectedError()
        return [selected]

    def focus(self, path: Path) -> bool:
        """Move the cursor onto ``path`` if it is listed in the working directory."""
        try:
            index = self.listing().index(path)
        except ValueError:
            return False
        self.set_cursor(index)
        return True

    def refresh_preview(self, max_bytes: int = PREVIEW_MAX_BYTES) -> None:
        selected = self.selected_path()
        # Nothing selected previews as blank rather than as a binary file.
        self.preview_contents = "" if selected is None else load_preview(selected, max_bytes)


__all__ = ["SessionState", "clamp_cursor"]
