"""Interactive prompt abstraction.

Services ask questions through PromptProvider so their decision logic can
be driven by ScriptedPrompts in tests instead of a terminal.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

import typer

from .console import ConsoleProtocol, Style

__all__ = [
    "Choice",
    "PromptProvider",
    "ScriptedPrompts",
    "TyperPrompts",
]


@dataclass(frozen=True, slots=True)
class Choice:
    value: str
    label: str


class PromptProvider(Protocol):
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    def text(self, message: str, *, default: str = "") -> str:
        """Ask for free text. An empty answer returns ``default``."""
        ...

    def select(self, message: str, choices: list[Choice]) -> str:
        """Ask for exactly one of ``choices``; returns its value."""
        ...


class TyperPrompts:
    """Terminal prompts via typer (click)."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def confirm(self, message: str, *, default: bool) -> bool:
        return typer.confirm(message, default=default)

    def text(self, message: str, *, default: str = "") -> str:
        answer: str = typer.prompt(message, default=default, show_default=bool(default))
        return answer

    def select(self, message: str, choices: list[Choice]) -> str:
        if not choices:
            raise ValueError("select requires at least one choice")

        self._console.print(message, Style.BOLD)
        for i, choice in enumerate(choices, start=1):
            self._console.print(f"{i:2}. {choice.label}")

        while True:
            raw = typer.prompt("Pick a number", default="1")
            try:
                idx = int(raw)
            except ValueError:
                self._console.error("invalid number")
                continue
            if idx < 1 or idx > len(choices):
                self._console.error("out of range")
                continue
            return choices[idx - 1].value


def _empty_answers() -> list[object]:
    return []


@dataclass
class ScriptedPrompts:
    """Prompt provider answering from a fixed script, for tests.

    Answers are consumed in order: bools for confirm, strings for text and
    select. ``None`` for a text prompt means "accept the default".
    """

    answers: list[object] = field(default_factory=_empty_answers)
    asked: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, answers: Iterable[object]) -> ScriptedPrompts:
        return cls(answers=list(answers))

    def _next(self, message: str) -> object:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        return self.answers.pop(0)

    def confirm(self, message: str, *, default: bool) -> bool:
        answer = self._next(message)
        if not isinstance(answer, bool):
            raise AssertionError(f"expected bool answer for {message!r}, got {answer!r}")
        return answer

    def text(self, message: str, *, default: str = "") -> str:
        answer = self._next(message)
        if answer is None:
            return default
        if not isinstance(answer, str):
            raise AssertionError(f"expected str answer for {message!r}, got {answer!r}")
        return answer

    def select(self, message: str, choices: list[Choice]) -> str:
        answer = self._next(message)
        values = [c.value for c in choices]
        if answer not in values:
            raise AssertionError(f"{answer!r} is not one of {values}")
        return str(answer)
