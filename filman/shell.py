"""Shell escape: run ``!program arg...`` directly, without a shell.

Output is captured and discarded. Only spawn failures are errors; a non-zero
exit status is not.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import CommandParseError, ShellCommandError
from .paths import full_path_str

logger = logging.getLogger(__name__)


def parse_shell_command(line: str) -> tuple[str, list[str]]:
    """Split ``!program arg...`` into program and argument list."""
    if not line.startswith("!"):
        raise CommandParseError("Shell commands must start with '!'")
    tokens = line[1:].split()
    if not tokens:
        raise CommandParseError("Shell command has no program")
    return tokens[0], tokens[1:]


def execute_shell_command(line: str, cwd: Path) -> None:
    program, args = parse_shell_command(line)
    logger.debug("spawning %s %s in %s", program, args, cwd)
    try:
        completed = subprocess.run(
            [program, *args],
            cwd=full_path_str(cwd),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise ShellCommandError(str(exc)) from exc
    logger.debug("%s exited with %d", program, completed.returncode)


__all__ = ["parse_shell_command", "execute_shell_command"]
