"""Public runtime entry points.

Groups the terminal controller, keybinding config, and the interactive loop.
Loop imports are deferred so ``filman.runtime.config`` stays importable from
the input layer without a package-import cycle.
"""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the browser entrypoint."""
    from .loop import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = ["run_browser"]
