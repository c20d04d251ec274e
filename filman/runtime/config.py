"""Keybinding configuration loaded once at startup.

The file is JSON of the form::

    {"keys": {"simple": {"x": ":delete scratch", "g": [":cursor_up", ":cursor_up"]}}}

Deserialization is strict: anything malformed raises ``ConfigError``, which
the CLI treats as fatal. The parsed table is an explicit ``KeyBindings``
object handed to the input layer, never module-level state.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "filman"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class KeyBindings:
    """Map single characters to one or more command strings."""

    simple: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def commands_for(self, key: str) -> tuple[str, ...]:
        return self.simple.get(key, ())


def _expect_object(value: object, where: str, allowed: set[str]) -> dict[str, object]:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be an object")
    unknown = sorted(set(value) - allowed)
    if unknown:
        raise ConfigError(f"unknown field(s) in {where}: {', '.join(unknown)}")
    return value


def _parse_commands(key: str, raw: object) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"binding for {key!r} must be a string or a non-empty list of strings")
    commands: list[str] = []
    for command in raw:
        if not isinstance(command, str) or not command.strip():
            raise ConfigError(f"binding for {key!r} contains an empty or non-string command")
        commands.append(command)
    return tuple(commands)


def parse_key_bindings(data: object) -> KeyBindings:
    """Validate decoded JSON and build ``KeyBindings``."""
    root = _expect_object(data, "config", {"keys"})
    keys = _expect_object(root.get("keys", {}), "keys", {"simple"})
    simple = keys.get("simple", {})
    if not isinstance(simple, dict):
        raise ConfigError("keys.simple must be an object")

    bindings: dict[str, tuple[str, ...]] = {}
    for key, raw in simple.items():
        if len(key) != 1:
            raise ConfigError(f"binding key {key!r} must be a single character")
        bindings[key] = _parse_commands(key, raw)
    return KeyBindings(simple=bindings)


def load_key_bindings(path: Path | None = None) -> KeyBindings:
    """Load bindings from ``path`` or the platform config location.

    An explicitly named file must exist. A missing default file yields an
    empty table.
    """
    config_path = DEFAULT_CONFIG_PATH if path is None else path
    if path is None and not config_path.exists():
        logger.info("no keybinding config at %s; using built-in keys only", config_path)
        return KeyBindings()

    try:
        with config_path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read {config_path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path} is not valid JSON: {exc}") from exc

    bindings = parse_key_bindings(data)
    logger.info("loaded %d keybinding(s) from %s", len(bindings.simple), config_path)
    return bindings


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_PATH",
    "KeyBindings",
    "parse_key_bindings",
    "load_key_bindings",
]
