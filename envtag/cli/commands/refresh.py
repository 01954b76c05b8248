from __future__ import annotations

from envtag.cli.commands._helpers import exit_on_error
from envtag.cli.context import build_context
from envtag.core.errors import ErrorCode


def refresh() -> None:
    """Fetch tags from the remote repository."""
    ctx = build_context()
    remote = ctx.settings.remote

    ctx.console.info(f"Fetching tags from {remote}...")
    exit_on_error(ctx.repo.fetch_tags(remote), ctx, error_code=ErrorCode.NETWORK_ERROR)
    ctx.console.success("Tags refreshed successfully")
