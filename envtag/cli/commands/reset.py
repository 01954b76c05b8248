from __future__ import annotations

from envtag.cli.commands._helpers import exit_on_error
from envtag.cli.context import build_context
from envtag.core.errors import ErrorCode
from envtag.core.registry import reset_registry
from envtag.core.result import Ok
from envtag.output.console import Style


def reset() -> None:
    """Reset configuration by deleting the config file."""
    ctx = build_context()
    path = ctx.settings.config_path

    result = reset_registry(path, lambda msg: ctx.prompts.confirm(msg, default=False))
    exit_on_error(result, ctx, error_code=ErrorCode.IO_ERROR)

    match result:
        case Ok("deleted"):
            ctx.console.success(f"Configuration file {path.name} deleted")
            ctx.console.print("Run `tag setup` to configure environments again.", Style.DIM)
        case Ok("cancelled"):
            ctx.console.print("Reset cancelled.", Style.WARNING)
        case _:
            ctx.console.print(f"No configuration file found at {path.name}", Style.WARNING)
            ctx.console.print("Using default configuration.", Style.DIM)
