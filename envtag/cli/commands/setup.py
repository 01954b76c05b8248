from __future__ import annotations

from envtag.cli.commands._helpers import exit_on_error
from envtag.cli.context import build_context
from envtag.core.errors import ErrorCode
from envtag.services.setup import SetupService


def setup() -> None:
    """Configure environments by detecting prefixes from existing tags."""
    ctx = build_context()

    result = SetupService(
        repo=ctx.repo,
        config_path=ctx.settings.config_path,
        console=ctx.console,
        prompts=ctx.prompts,
        remote=ctx.settings.remote,
    ).run()

    exit_on_error(result, ctx, error_code=ErrorCode.IO_ERROR)
