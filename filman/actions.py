"""Discrete effects produced by the input layer for the runtime loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .modes import Mode


@dataclass(frozen=True)
class RunCommand:
    command: str


@dataclass(frozen=True)
class RunShellCommand:
    command: str


@dataclass(frozen=True)
class SwitchMode:
    mode: Mode


@dataclass(frozen=True)
class Quit:
    pass


Action = Union[RunCommand, RunShellCommand, SwitchMode, Quit]

__all__ = ["RunCommand", "RunShellCommand", "SwitchMode", "Quit", "Action"]
