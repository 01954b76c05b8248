"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .prompts import (
    Choice,
    PromptProvider,
    ScriptedPrompts,
    TyperPrompts,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "Choice",
    "PromptProvider",
    "ScriptedPrompts",
    "TyperPrompts",
]
