"""Command-line front door for filman.

Parses CLI options, resolves the start directory, loads keybindings, and
configures logging. Then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .errors import ConfigError
from .runtime import run_browser
from .runtime.config import DEFAULT_CONFIG_PATH, load_key_bindings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_start(path: Path) -> tuple[Path, Path | None]:
    """Return ``(directory, focus)``; a file path starts in its parent.

    The directory is resolved so ``..`` components never reach the session.
    A file keeps its own name so a symlinked file stays focused as the link.
    """
    if path.is_dir():
        return path.resolve(), None
    parent = path.absolute().parent.resolve()
    return parent, parent / path.name


def configure_logging(log_file: Path | None) -> None:
    if log_file is None:
        return
    logging.basicConfig(filename=str(log_file), level=logging.DEBUG, format=LOG_FORMAT)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch filman in a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse and manage files with vi-style keys and :commands."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Keybinding config JSON (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--style", default="monokai", help="Pygments style name for previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors and syntax highlighting.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    args = parser.parse_args()

    configure_logging(args.log_file)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    try:
        bindings = load_key_bindings(args.config)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    start, focus = resolve_start(path)
    run_browser(start, bindings, focus=focus, style=args.style, no_color=args.no_color)


if __name__ == "__main__":
    main()
