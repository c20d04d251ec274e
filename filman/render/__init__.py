"""Rendering for the three-pane browser view.

``build_render_state`` takes a read-only snapshot of ``SessionState``;
``render_frame`` turns that snapshot into a complete ANSI frame string and
``draw`` writes it. Nothing here mutates session state.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import RESET, fit_ansi_line
from ..errors import ReadDirectoryError
from ..fs import list_directory_children
from ..modes import CommandMode, ShellCommandMode
from ..paths import human_size
from ..preview import BINARY_PLACEHOLDER, highlight_preview
from ..state import SessionState, clamp_cursor

PARENT_PANE_PERCENT = 30
FILES_PANE_PERCENT = 40
PANE_SEPARATOR = "\033[2m│\033[0m"
DIRECTORY_SGR = "\033[1;34m"
ERROR_SGR = "\033[1;31m"
DIM_SGR = "\033[2m"


@dataclass(frozen=True)
class FileRow:
    name: str
    info: str
    is_dir: bool


@dataclass(frozen=True)
class RenderState:
    directory: Path
    files: tuple[FileRow, ...]
    selected_in_pwd: int | None
    multi_select: frozenset[str]
    yanked: frozenset[str]
    parent_files: tuple[str, ...]
    selected_in_parent: int | None
    preview: str
    preview_is_binary: bool
    preview_path: Path | None
    command_line: str
    command_is_error: bool
    prompt_cursor: int | None


def display_name(path: Path) -> str:
    """Lossy text form of a filename for display only."""
    return path.name.encode("utf-8", "surrogateescape").decode("utf-8", "replace") or str(path)


def _names_in(paths, directory: Path) -> frozenset[str]:
    return frozenset(display_name(p) for p in paths if p.parent == directory)


def build_render_state(state: SessionState) -> RenderState:
    """Project ``state`` into the values the renderer needs.

    Raises ``ReadDirectoryError`` when the working directory cannot be listed.
    """
    directory = state.working_directory
    children = list_directory_children(directory)
    files = tuple(
        FileRow(
            name=display_name(child.path),
            info=human_size(child.size),
            is_dir=child.is_dir,
        )
        for child in children
    )
    selected_in_pwd: int | None = None
    preview_path: Path | None = None
    if children:
        selected_in_pwd = clamp_cursor(state.cursor_by_directory.get(directory, 0), len(children))
        preview_path = children[selected_in_pwd].path

    if isinstance(state.mode, (CommandMode, ShellCommandMode)):
        prompt_text: str | None = state.mode.reader.text
        prompt_cursor: int | None = state.mode.reader.cursor
    else:
        prompt_text = None
        prompt_cursor = None

    if state.last_error is not None:
        command_line, command_is_error, prompt_cursor = state.last_error, True, None
    else:
        command_line, command_is_error = prompt_text or "", False

    # An unreadable parent only blanks the parent pane.
    try:
        parent_files = tuple(display_name(p) for p in state.parent_listing())
        selected_in_parent = state.selected_index_in_parent()
    except ReadDirectoryError:
        parent_files, selected_in_parent = (), None

    preview_is_binary = state.preview_contents is None
    return RenderState(
        directory=directory,
        files=files,
        selected_in_pwd=selected_in_pwd,
        multi_select=_names_in(state.multi_select, directory),
        yanked=_names_in(state.yank_buffer, directory),
        parent_files=parent_files,
        selected_in_parent=selected_in_parent,
        preview=BINARY_PLACEHOLDER if preview_is_binary else state.preview_contents,
        preview_is_binary=preview_is_binary,
        preview_path=preview_path,
        command_line=command_line,
        command_is_error=command_is_error,
        prompt_cursor=prompt_cursor,
    )


def selected_with_ansi(text: str) -> str:
    """Apply reverse video without discarding existing ANSI colors."""
    if not text:
        return text
    return "\033[7m" + text.replace(RESET, "\033[0;7m") + RESET


def pane_widths(width: int) -> tuple[int, int, int]:
    """Split ``width`` into parent/files/preview columns around two separators."""
    usable = max(3, width - 2)
    left = max(1, usable * PARENT_PANE_PERCENT // 100)
    middle = max(1, usable * FILES_PANE_PERCENT // 100)
    right = max(1, usable - left - middle)
    return left, middle, right


def scroll_start(selected: int | None, total: int, rows: int) -> int:
    """First visible row index that keeps ``selected`` on screen."""
    if selected is None or total <= rows:
        return 0
    return max(0, min(selected - rows + 1, total - rows)) if selected >= rows else 0


def format_file_row(row: FileRow, width: int, *, yanked: bool, multi_selected: bool, no_color: bool) -> str:
    marks = ("Y" if yanked else " ") + ("S" if multi_selected else " ") + " "
    label = row.name + ("/" if row.is_dir else "")
    info = f" {row.info}" if row.info else ""
    name_cols = max(0, width - len(marks) - len(info))
    name_text = fit_ansi_line(label, name_cols)
    if row.is_dir and not no_color:
        name_text = DIRECTORY_SGR + name_text + RESET
    return marks + name_text + info


def _pane_column(
    lines: list[str],
    selected: int | None,
    rows: int,
    width: int,
) -> list[str]:
    start = scroll_start(selected, len(lines), rows)
    out: list[str] = []
    for idx in range(start, start + rows):
        text = fit_ansi_line(lines[idx], width) if idx < len(lines) else " " * width
        if idx == selected:
            text = selected_with_ansi(text)
        out.append(text)
    return out


def _preview_lines(render_state: RenderState, rows: int, style: str, no_color: bool) -> list[str]:
    if render_state.preview_is_binary:
        placeholder = render_state.preview if no_color else f"{DIM_SGR}{render_state.preview}{RESET}"
        return [placeholder]
    head = [line.rstrip("\r") for line in render_state.preview.split("\n")[:rows]]
    if no_color or render_state.preview_path is None or render_state.preview_path.is_dir():
        return head
    return highlight_preview("\n".join(head), render_state.preview_path, style).split("\n")


def _command_row(render_state: RenderState, width: int, no_color: bool) -> str:
    text = render_state.command_line
    if render_state.command_is_error:
        line = fit_ansi_line(text, width)
        return line if no_color else ERROR_SGR + line + RESET
    cursor = render_state.prompt_cursor
    if cursor is None:
        return fit_ansi_line(text, width)
    before, at, after = text[:cursor], text[cursor : cursor + 1] or " ", text[cursor + 1 :]
    return fit_ansi_line(before + selected_with_ansi(at) + after, width)


def render_frame(
    render_state: RenderState,
    width: int,
    height: int,
    *,
    style: str = "monokai",
    no_color: bool = False,
) -> str:
    """Compose the full screen: title bar, three panes, and the command line."""
    width = max(5, width)
    body_rows = max(1, height - 2)
    left, middle, right = pane_widths(width)

    parent_column = _pane_column(list(render_state.parent_files), render_state.selected_in_parent, body_rows, left)
    file_lines = [
        format_file_row(
            row,
            middle,
            yanked=row.name in render_state.yanked,
            multi_selected=row.name in render_state.multi_select,
            no_color=no_color,
        )
        for row in render_state.files
    ]
    files_column = _pane_column(file_lines, render_state.selected_in_pwd, body_rows, middle)
    preview = _preview_lines(render_state, body_rows, style, no_color)

    out: list[str] = ["\033[H\033[J"]
    out.append(selected_with_ansi(fit_ansi_line(f" {render_state.directory}", width)))
    out.append("\r\n")
    for row in range(body_rows):
        preview_text = preview[row] if row < len(preview) else ""
        out.append(parent_column[row])
        out.append(PANE_SEPARATOR)
        out.append(files_column[row])
        out.append(PANE_SEPARATOR)
        out.append(fit_ansi_line(preview_text, right))
        out.append("\r\n")
    out.append(_command_row(render_state, width, no_color))
    return "".join(out)


def draw(
    render_state: RenderState,
    width: int,
    height: int,
    *,
    style: str = "monokai",
    no_color: bool = False,
    fd: int | None = None,
) -> None:
    frame = render_frame(render_state, width, height, style=style, no_color=no_color)
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, frame.encode("utf-8", errors="replace"))


__all__ = [
    "FileRow",
    "RenderState",
    "display_name",
    "build_render_state",
    "selected_with_ansi",
    "pane_widths",
    "scroll_start",
    "format_file_row",
    "render_frame",
    "draw",
]
