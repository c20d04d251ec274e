"""Single-line prompt editor used by command and shell-command modes.

The buffer and edit cursor are private; callers only ``feed`` key tokens and
read back the text for display. ``ENTER`` finishes the prompt.
"""

from __future__ import annotations


class PromptReader:
    """Accumulate key tokens into a line with a movable edit cursor."""

    def __init__(self, placeholder: str = "") -> None:
        self._chars: list[str] = list(placeholder)
        self._cursor = len(self._chars)
        self._done = False

    def __repr__(self) -> str:
        return f"PromptReader(text={self.text!r}, cursor={self._cursor}, done={self._done})"

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def done(self) -> bool:
        return self._done

    def feed(self, key: str) -> str | None:
        """Apply one key token; return the finished line on ``ENTER``.

        Keys after completion are ignored. Multi-character tokens other than
        the editing keys below are ignored too.
        """
        if self._done:
            return None

        if key == "ENTER":
            self._done = True
            return self.text
        if key == "LEFT":
            self._cursor = max(0, self._cursor - 1)
        elif key == "RIGHT":
            self._cursor = min(len(self._chars), self._cursor + 1)
        elif key == "HOME":
            self._cursor = 0
        elif key == "END":
            self._cursor = len(self._chars)
        elif key == "BACKSPACE":
            if self._cursor > 0:
                del self._chars[self._cursor - 1]
                self._cursor -= 1
        elif key == "DELETE":
            if self._cursor < len(self._chars):
                del self._chars[self._cursor]
        elif len(key) == 1 and key.isprintable():
            self._chars.insert(self._cursor, key)
            self._cursor += 1
        return None


__all__ = ["PromptReader"]
