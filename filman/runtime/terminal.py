"""Terminal session control for the browser.

``TerminalController`` puts the controlling tty into raw mode on the
alternate screen for the lifetime of a browsing session and reports the
current screen size for each redraw. Leaving the session always restores the
saved tty attributes, including when the loop raises.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Own raw mode and the alternate screen for one browsing session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the output tty, or 80x24 if unknown."""
        try:
            columns, lines = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return FALLBACK_SIZE
        if columns <= 0 or lines <= 0:
            return FALLBACK_SIZE
        return columns, lines

    def enable_tui_mode(self) -> None:
        """Switch to raw input, the alternate screen, and a hidden cursor."""
        if self._active:
            return
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._active = True
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Undo ``enable_tui_mode``; the saved tty attributes are always restored."""
        try:
            if self._active:
                os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        finally:
            self._active = False
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController", "ENTER_TUI_SEQUENCE", "EXIT_TUI_SEQUENCE", "FALLBACK_SIZE"]
