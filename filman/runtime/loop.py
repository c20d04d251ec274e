"""Main interactive event loop for the terminal UI.

One blocking key read per iteration. Each cycle clears the previous error,
turns the key into actions for the active mode, applies them in order, then
refreshes the preview and redraws. A failing action records its message and
the remaining actions of the batch still run.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from ..actions import Action, Quit, RunCommand, RunShellCommand, SwitchMode
from ..commands import execute_command
from ..errors import FilmanError, ReadDirectoryError
from ..input import read_key
from ..input.keys import dispatch_key
from ..render import build_render_state, draw
from ..shell import execute_shell_command
from ..state import SessionState
from .config import KeyBindings
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeOptions:
    """Display options chosen on the command line."""

    style: str = "monokai"
    no_color: bool = False


def record_error(state: SessionState, exc: FilmanError) -> None:
    logger.warning("%s", exc)
    state.last_error = str(exc)


def apply_actions(actions: list[Action], state: SessionState) -> bool:
    """Execute ``actions`` in order; return ``True`` when the app should quit."""
    for action in actions:
        if isinstance(action, Quit):
            return True
        try:
            if isinstance(action, RunCommand):
                execute_command(action.command, state)
            elif isinstance(action, RunShellCommand):
                execute_shell_command(action.command, state.working_directory)
            elif isinstance(action, SwitchMode):
                logger.debug("mode -> %s", type(action.mode).__name__)
                state.mode = action.mode
        except FilmanError as exc:
            record_error(state, exc)
    return False


def retreat_to_readable_directory(state: SessionState) -> bool:
    """Move to the nearest listable ancestor; ``False`` if none exists."""
    candidate = state.working_directory
    while True:
        try:
            state.listing(candidate)
        except ReadDirectoryError:
            parent = candidate.parent
            if parent == candidate:
                return False
            candidate = parent
            continue
        break
    state.working_directory = candidate
    return True


def handle_key(key: str, state: SessionState, bindings: KeyBindings) -> bool:
    """Run one keystroke cycle and return ``True`` on quit."""
    state.last_error = None
    try:
        actions = dispatch_key(key, state, bindings)
    except FilmanError as exc:
        record_error(state, exc)
        return False
    return apply_actions(actions, state)


def redraw(state: SessionState, options: RuntimeOptions, terminal: TerminalController) -> None:
    try:
        state.refresh_preview()
    except FilmanError as exc:
        record_error(state, exc)

    try:
        render_state = build_render_state(state)
    except ReadDirectoryError as exc:
        record_error(state, exc)
        if not retreat_to_readable_directory(state):
            raise
        render_state = build_render_state(state)

    columns, lines = terminal.size()
    draw(
        render_state,
        columns,
        lines,
        style=options.style,
        no_color=options.no_color,
        fd=terminal.stdout_fd,
    )


def run_main_loop(
    state: SessionState,
    bindings: KeyBindings,
    terminal: TerminalController,
    options: RuntimeOptions,
) -> None:
    """Run the interactive loop until a quit action or stdin EOF."""
    skip_next_lf = False
    with terminal.raw_mode():
        while True:
            redraw(state, options, terminal)

            key = read_key(terminal.stdin_fd)
            if key == "":
                break
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            if handle_key(key, state, bindings):
                break


def run_browser(
    start: Path,
    bindings: KeyBindings,
    *,
    focus: Path | None = None,
    style: str = "monokai",
    no_color: bool = False,
) -> None:
    """Create a session at ``start`` and run it on the controlling terminal."""
    state = SessionState.at(start)
    if focus is not None:
        state.focus(focus)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    logger.info("starting in %s", state.working_directory)
    run_main_loop(
        state,
        bindings,
        terminal,
        RuntimeOptions(style=style, no_color=no_color),
    )
    logger.info("quit from %s", state.working_directory)


__all__ = [
    "RuntimeOptions",
    "record_error",
    "apply_actions",
    "retreat_to_readable_directory",
    "handle_key",
    "redraw",
    "run_main_loop",
    "run_browser",
]
