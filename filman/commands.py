"""Command interpreter for ``:name arg...`` lines.

Each handler mutates ``SessionState`` or the filesystem and raises a
``FilmanError`` subclass on failure. Arguments resolve against the working
directory; there is no quoting, so names containing spaces cannot be given.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from .errors import (
    CommandError,
    CommandParseError,
    EmptyDirectoryError,
    FileOverwriteError,
    NoFileSelectedError,
    NoParentError,
    NotDirectoryError,
)
from .paths import filename
from .state import SessionState

logger = logging.getLogger(__name__)

CommandHandler = Callable[[list[str], SessionState], None]


def _require_exactly(name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise CommandError(f"{name} takes exactly {count} {plural}")


def _require_at_least_one(name: str, args: list[str]) -> None:
    if not args:
        raise CommandError(f"{name} takes at least one argument")


def _require_none(name: str, args: list[str]) -> None:
    if args:
        raise CommandError(f"{name} takes no arguments")


def rename(args: list[str], state: SessionState) -> None:
    _require_exactly(":rename", args, 1)
    old_path = state.selected_path()
    if old_path is None:
        raise NoFileSelectedError()
    new_path = state.resolve(args[0])

    try:
        old_path.rename(new_path)
    except OSError as exc:
        raise CommandError(str(exc)) from exc
    logger.debug("renamed %s -> %s", old_path, new_path)
    state.focus(new_path)


def delete(args: list[str], state: SessionState) -> None:
    _require_at_least_one(":delete", args)
    for name in args:
        path = state.resolve(name)
        state.multi_select.discard(path)
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except OSError as exc:
            raise CommandError(str(exc)) from exc
        logger.debug("deleted %s", path)


def yank(args: list[str], state: SessionState) -> None:
    _require_at_least_one(":yank", args)
    state.yank_buffer = [state.resolve(name) for name in args]


def paste(args: list[str], state: SessionState) -> None:
    """Copy every yanked path into the working directory.

    Stops at the first name collision; copies made before it are kept.
    """
    _require_none(":paste", args)
    for source in state.yank_buffer:
        name = filename(source)
        existing = {path.name for path in state.listing()}
        if name in existing:
            raise FileOverwriteError(name)

        target = state.resolve(name)
        try:
            if source.is_dir() and not source.is_symlink():
                shutil.copytree(source, target, symlinks=True)
            else:
                shutil.copy2(source, target, follow_symlinks=False)
        except (OSError, shutil.Error) as exc:
            raise CommandError(str(exc)) from exc
        logger.debug("pasted %s -> %s", source, target)


def toggle_select(args: list[str], state: SessionState) -> None:
    _require_at_least_one(":toggle_select", args)
    for name in args:
        path = state.resolve(name)
        if path in state.multi_select:
            state.multi_select.remove(path)
        else:
            state.multi_select.add(path)


def cursor_down(args: list[str], state: SessionState) -> None:
    _require_none(":cursor_down", args)
    count = len(state.listing())
    if count == 0:
        state.set_cursor(0)
        return
    current = state.cursor_index()
    state.set_cursor((current + 1) % count)


def cursor_up(args: list[str], state: SessionState) -> None:
    _require_none(":cursor_up", args)
    count = len(state.listing())
    if count == 0:
        return
    current = state.cursor_index()
    state.set_cursor((current - 1) % count)


def cursor_descend(args: list[str], state: SessionState) -> None:
    _require_none(":cursor_descend", args)
    selected = state.selected_path()
    if selected is None:
        raise EmptyDirectoryError(state.working_directory)
    if not selected.is_dir():
        raise NotDirectoryError(selected)

    # Surface unreadable directories before the working directory moves.
    state.listing(selected)
    state.working_directory = selected
    state.cursor_by_directory.setdefault(selected, 0)


def cursor_ascend(args: list[str], state: SessionState) -> None:
    _require_none(":cursor_ascend", args)
    current = state.working_directory
    parent = current.parent
    if parent == current:
        raise NoParentError()

    siblings = state.listing(parent)
    try:
        index = siblings.index(current)
    except ValueError:
        index = 0

    state.working_directory = parent
    state.set_cursor(index)


def clear_selection(args: list[str], state: SessionState) -> None:
    _require_none(":clear_selection", args)
    state.multi_select.clear()


COMMANDS: dict[str, CommandHandler] = {
    ":rename": rename,
    ":delete": delete,
    ":yank": yank,
    ":paste": paste,
    ":toggle_select": toggle_select,
    ":cursor_down": cursor_down,
    ":cursor_up": cursor_up,
    ":cursor_ascend": cursor_ascend,
    ":cursor_descend": cursor_descend,
    ":clear_selection": clear_selection,
}


def parse_command(line: str) -> tuple[str, list[str]]:
    """Split ``line`` into a command name and its arguments."""
    tokens = line.split()
    if not tokens:
        raise CommandParseError("Could not split command string into command name and arguments")
    return tokens[0], tokens[1:]


def execute_command(line: str, state: SessionState) -> None:
    name, args = parse_command(line)
    handler = COMMANDS.get(name)
    if handler is None:
        raise CommandError(f"Unrecognized command: {name}")
    logger.debug("executing %s %s", name, args)
    handler(args, state)


__all__ = ["COMMANDS", "CommandHandler", "parse_command", "execute_command"]
