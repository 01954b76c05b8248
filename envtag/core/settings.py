"""Repository root and fixed paths.

The environment mapping lives in `.tag-config.json` at the root of the
repository whose tags are managed. The root is resolved, in order, from:
- the `--repo` option
- the `TAG_REPO_ROOT` environment variable
- `git rev-parse --show-toplevel` from the current directory
- the current directory
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CONFIG_FILENAME",
    "REMOTE",
    "ROOT_ENV_VAR",
    "Settings",
    "resolve_root",
]

CONFIG_FILENAME = ".tag-config.json"
REMOTE = "origin"
ROOT_ENV_VAR = "TAG_REPO_ROOT"


@dataclass(frozen=True, slots=True)
class Settings:
    root: Path
    remote: str = REMOTE

    @property
    def config_path(self) -> Path:
        """Path to the persisted environment mapping."""
        return self.root / CONFIG_FILENAME


def resolve_root(
    explicit: Path | None,
    *,
    toplevel: Callable[[Path], Path | None],
    cwd: Path | None = None,
) -> Path:
    if explicit is not None:
        return explicit.expanduser().resolve()

    env = os.environ.get(ROOT_ENV_VAR)
    if env:
        p = Path(env).expanduser().resolve()
        if p.is_dir():
            return p

    start = (cwd or Path.cwd()).resolve()
    top = toplevel(start)
    if top is not None:
        return top
    return start
