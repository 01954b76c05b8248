from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from envtag.core.registry import EnvironmentRegistry, load_registry
from envtag.core.settings import ROOT_ENV_VAR, Settings, resolve_root
from envtag.git.repository import TagRepository, TagSource, find_toplevel
from envtag.output.console import ConsoleProtocol, RichConsole
from envtag.output.prompts import PromptProvider, TyperPrompts


@dataclass(frozen=True, slots=True)
class CLIContext:
    settings: Settings
    repo: TagSource
    registry: EnvironmentRegistry
    console: ConsoleProtocol
    prompts: PromptProvider


def build_context() -> CLIContext:
    env_root = os.environ.get(ROOT_ENV_VAR)
    explicit = Path(env_root) if env_root else None
    settings = Settings(root=resolve_root(explicit, toplevel=find_toplevel))

    console = RichConsole()
    return CLIContext(
        settings=settings,
        repo=TagRepository(settings.root),
        registry=load_registry(settings.config_path, console),
        console=console,
        prompts=TyperPrompts(console),
    )
