from __future__ import annotations

import typer

from envtag.cli.commands._helpers import exit_on_error, exit_with_code
from envtag.cli.context import CLIContext, build_context
from envtag.core.errors import ErrorCode
from envtag.core.result import Err
from envtag.output.console import Style
from envtag.output.prompts import Choice
from envtag.services.bump import BumpError, execute_bump, plan_bump

ANNOTATION_PROMPT = "Annotation message (optional, leave blank to create a lightweight tag)"


def _choose_environment(ctx: CLIContext, env_arg: str | None) -> str:
    if env_arg is not None and env_arg in ctx.registry:
        return env_arg

    if not ctx.registry:
        ctx.console.error("No environments configured. Run `tag setup` first.")
        exit_with_code(int(ErrorCode.USER_ERROR))

    choices = [Choice(value=key, label=f"{key} ({env.label})") for key, env in ctx.registry.items()]
    return ctx.prompts.select("Which environment do you want to tag?", choices)


def _bump_error_code(error: BumpError) -> ErrorCode:
    match error.kind:
        case "unknown_environment":
            return ErrorCode.USER_ERROR
        case "create_failed":
            return ErrorCode.GIT_ERROR
        case _:
            return ErrorCode.NETWORK_ERROR


def bump(
    env: str | None = typer.Argument(None, help="Environment key (prompted if omitted)"),
) -> None:
    """Create and push the next patch tag for an environment."""
    ctx = build_context()
    key = _choose_environment(ctx, env)

    planned = plan_bump(key, ctx.registry, ctx.repo)
    if isinstance(planned, Err):
        exit_on_error(planned, ctx, error_code=_bump_error_code(planned.error))
        return
    plan = planned.value

    ctx.console.newline()
    ctx.console.print(f"Environment: {plan.environment.label} ({key})", Style.BOLD)
    current = plan.current.name if plan.current is not None else "(none)"
    ctx.console.print(f"Current latest: {current}")
    ctx.console.print(f"Next tag:       {plan.next_tag}", Style.TAG)
    ctx.console.newline()

    annotation = ctx.prompts.text(ANNOTATION_PROMPT)

    result = execute_bump(
        ctx.repo,
        plan.next_tag,
        annotation,
        ctx.console,
        remote=ctx.settings.remote,
    )
    if isinstance(result, Err):
        exit_on_error(result, ctx, error_code=_bump_error_code(result.error))
        return

    if plan.environment.description:
        ctx.console.print(plan.environment.description, Style.DIM)
