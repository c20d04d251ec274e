"""Preview loading, sanitization, and syntax highlighting.

Only one preview is held at a time. Oversized, unreadable, or non-UTF-8 files
are reported as ``None`` and shown with a binary placeholder.
"""

from __future__ import annotations

import re
import stat
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .errors import ReadDirectoryError
from .fs import list_directory_children

PREVIEW_MAX_BYTES = 256 * 1024
BINARY_PLACEHOLDER = "Binary file"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, Terminal256Formatter] = {}


def sanitize_terminal_text(source: str) -> str:
    """Escape control bytes so previews cannot move the cursor or ring the bell."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def load_preview(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> str | None:
    """Return preview text for ``path`` or ``None`` when it should not be shown.

    Directories preview as their child names, one per line.
    """
    if path.is_dir():
        try:
            children = list_directory_children(path)
        except ReadDirectoryError:
            return None
        return "\n".join(sanitize_terminal_text(child.name) for child in children)

    # FIFOs and devices report size 0; opening them can block or never end.
    try:
        st = path.stat()
        if not stat.S_ISREG(st.st_mode) or st.st_size > max_bytes:
            return None
        with path.open("rb") as handle:
            raw = handle.read(max_bytes + 1)
    except OSError:
        return None

    if len(raw) > max_bytes or b"\x00" in raw:
        return None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return sanitize_terminal_text(text.replace("\r\n", "\n"))


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        try:
            formatter = Terminal256Formatter(style=get_style_by_name(style))
        except ClassNotFound:
            formatter = Terminal256Formatter()
        _FORMATTERS[style] = formatter
    return formatter


def highlight_preview(text: str, path: Path, style: str = "monokai") -> str:
    """Colorize ``text`` with the Pygments lexer chosen from ``path``'s name."""
    if not text:
        return text
    try:
        lexer = get_lexer_for_filename(path.name, stripnl=False, stripall=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    rendered = highlight(text, lexer, _formatter_for_style(style))
    if not text.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


__all__ = [
    "PREVIEW_MAX_BYTES",
    "BINARY_PLACEHOLDER",
    "sanitize_terminal_text",
    "load_preview",
    "highlight_preview",
]
