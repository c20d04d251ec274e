"""Input modes: a tagged union over normal, command, and shell-command.

Text modes own a ``PromptReader``; entering a mode creates a fresh reader and
switching back to ``NormalMode`` drops it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .input.prompt import PromptReader


@dataclass
class NormalMode:
    pass


@dataclass
class CommandMode:
    reader: PromptReader = field(default_factory=lambda: PromptReader(":"))

    @classmethod
    def with_placeholder(cls, placeholder: str) -> CommandMode:
        return cls(PromptReader(placeholder))


@dataclass
class ShellCommandMode:
    reader: PromptReader = field(default_factory=lambda: PromptReader("!"))

    @classmethod
    def with_placeholder(cls, placeholder: str) -> ShellCommandMode:
        return cls(PromptReader(placeholder))


Mode = Union[NormalMode, CommandMode, ShellCommandMode]


__all__ = ["NormalMode", "CommandMode", "ShellCommandMode", "Mode"]
