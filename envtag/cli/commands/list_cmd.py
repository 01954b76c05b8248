from __future__ import annotations

from envtag.cli.context import build_context
from envtag.core.registry import Environment
from envtag.output.console import ConsoleProtocol, Style
from envtag.services.resolver import UNKNOWN_AUTHOR, TagRecord, latest_tag


def render_environment(env: Environment, latest: TagRecord | None, console: ConsoleProtocol) -> None:
    description = env.description or ""

    if latest is None:
        console.print(f"{env.label} ({env.key}) - {description}", Style.BOLD)
        console.print("(no tags found)", Style.WARNING)
        console.newline()
        return

    console.print(f"{env.label} ({env.key}): {latest.name} - {description}", Style.BOLD)
    if latest.annotation:
        line = latest.annotation
        if latest.author != UNKNOWN_AUTHOR and latest.relative_age:
            line += f" · {latest.author} · {latest.relative_age}"
        console.print(line, Style.DIM)
    console.newline()


def list_environments() -> None:
    """Show the latest tag for each environment."""
    ctx = build_context()

    if not ctx.registry:
        ctx.console.print(
            "No environments configured. Run `tag setup` to configure environments.",
            Style.WARNING,
        )
        return

    for key, env in ctx.registry.items():
        render_environment(env, latest_tag(key, ctx.registry, ctx.repo), ctx.console)
