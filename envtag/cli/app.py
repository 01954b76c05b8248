from __future__ import annotations

import os
from pathlib import Path

import typer

from envtag import __version__
from envtag.cli.commands.bump import bump
from envtag.cli.commands.list_cmd import list_environments
from envtag.cli.commands.refresh import refresh
from envtag.cli.commands.reset import reset
from envtag.cli.commands.setup import setup
from envtag.core.errors import ErrorCode
from envtag.core.settings import ROOT_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Helper for environment-specific git tags.",
)


app.command("list")(list_environments)
app.command()(setup)
app.command()(refresh)
app.command()(reset)
app.command()(bump)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository root (overrides auto detection)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if repo is not None:
        try:
            root = repo.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --repo: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --repo '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[ROOT_ENV_VAR] = str(root)


def main() -> None:
    app()
