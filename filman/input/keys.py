"""Keyboard dispatch for normal, command, and shell-command modes.

Handlers translate one key token into a list of ``Action`` objects. They do
not execute commands themselves; shortcuts that need the current selection
query ``SessionState`` and may raise a ``FilmanError`` when nothing usable is
selected.
"""

from __future__ import annotations

from ..actions import Action, Quit, RunCommand, RunShellCommand, SwitchMode
from ..errors import NoFileSelectedError
from ..modes import CommandMode, NormalMode, ShellCommandMode
from ..paths import filename
from ..runtime.config import KeyBindings
from ..state import SessionState
from .registry import KeyComboBinding, KeyComboRegistry


def _selected_filename(state: SessionState) -> str:
    name = state.selected_filename()
    if name is None:
        raise NoFileSelectedError()
    return name


def _multi_or_selected_names(state: SessionState) -> str:
    return " ".join(filename(path) for path in state.multi_select_or_selected())


def normal_mode_registry(state: SessionState) -> KeyComboRegistry:
    """Build the hard-coded normal-mode shortcut table bound to ``state``."""

    def command(*lines: str):
        return lambda: [RunCommand(line) for line in lines]

    def toggle_select_and_advance() -> list[Action]:
        return [
            RunCommand(f":toggle_select {_selected_filename(state)}"),
            RunCommand(":cursor_down"),
        ]

    def yank_selection() -> list[Action]:
        return [
            RunCommand(f":yank {_multi_or_selected_names(state)}"),
            RunCommand(":clear_selection"),
        ]

    def prompt_delete() -> list[Action]:
        placeholder = f":delete {_multi_or_selected_names(state)}"
        return [SwitchMode(CommandMode.with_placeholder(placeholder))]

    def prompt_rename() -> list[Action]:
        placeholder = f":rename {_selected_filename(state)}"
        return [SwitchMode(CommandMode.with_placeholder(placeholder))]

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("q",), lambda: [Quit()]),
        KeyComboBinding(("j", "DOWN"), command(":cursor_down")),
        KeyComboBinding(("k", "UP"), command(":cursor_up")),
        KeyComboBinding(("h", "LEFT"), command(":cursor_ascend")),
        KeyComboBinding(("l", "RIGHT"), command(":cursor_descend")),
        KeyComboBinding((" ",), toggle_select_and_advance),
        KeyComboBinding(("y",), yank_selection),
        KeyComboBinding(("p",), command(":paste")),
        KeyComboBinding(("D",), prompt_delete),
        KeyComboBinding(("A",), prompt_rename),
        KeyComboBinding((":",), lambda: [SwitchMode(CommandMode.with_placeholder(":"))]),
        KeyComboBinding(("!",), lambda: [SwitchMode(ShellCommandMode.with_placeholder("!"))]),
    )


def handle_normal_key(key: str, state: SessionState, bindings: KeyBindings) -> list[Action]:
    """Resolve built-in shortcuts first, then user-configured bindings."""
    registry = normal_mode_registry(state)
    if key in registry:
        return registry.dispatch(key) or []
    return [RunCommand(line) for line in bindings.commands_for(key)]


def handle_command_key(key: str, mode: CommandMode) -> list[Action]:
    if key == "ESC":
        return [SwitchMode(NormalMode())]
    line = mode.reader.feed(key)
    if line is None:
        return []
    return [RunCommand(line), SwitchMode(NormalMode())]


def handle_shell_key(key: str, mode: ShellCommandMode) -> list[Action]:
    if key == "ESC":
        return [SwitchMode(NormalMode())]
    line = mode.reader.feed(key)
    if line is None:
        return []
    return [RunShellCommand(line), SwitchMode(NormalMode())]


def dispatch_key(key: str, state: SessionState, bindings: KeyBindings) -> list[Action]:
    """Route ``key`` to the handler for the active mode."""
    mode = state.mode
    if isinstance(mode, CommandMode):
        return handle_command_key(key, mode)
    if isinstance(mode, ShellCommandMode):
        return handle_shell_key(key, mode)
    return handle_normal_key(key, state, bindings)


__all__ = [
    "normal_mode_registry",
    "handle_normal_key",
    "handle_command_key",
    "handle_shell_key",
    "dispatch_key",
]
