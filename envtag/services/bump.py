"""Next-tag planning and the create -> push -> refetch pipeline.

Reads degrade gracefully elsewhere, but every write step here must succeed
before the next one runs. A tag created locally is left in place when the
push fails.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from envtag.core.registry import Environment
from envtag.core.result import Err, Ok, Result
from envtag.core.settings import REMOTE
from envtag.git.repository import TagSource
from envtag.output.console import ConsoleProtocol
from envtag.services.resolver import TagRecord, latest_tag
from envtag.versioning import ZERO, format_version, next_patch

__all__ = ["BumpError", "BumpPlan", "execute_bump", "next_tag_name", "plan_bump"]

BumpErrorKind = Literal[
    "unknown_environment",
    "create_failed",
    "push_failed",
    "fetch_failed",
]


@dataclass(frozen=True, slots=True)
class BumpError:
    kind: BumpErrorKind
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class BumpPlan:
    environment: Environment
    current: TagRecord | None
    next_tag: str


def next_tag_name(environment: Environment, current: TagRecord | None) -> str:
    base = current.version if current is not None else ZERO
    return environment.prefix + format_version(next_patch(base))


def plan_bump(
    key: str,
    registry: Mapping[str, Environment],
    repo: TagSource,
) -> Result[BumpPlan, BumpError]:
    env = registry.get(key)
    if env is None:
        return Err(
            BumpError(
                kind="unknown_environment",
                message=f"unknown environment: {key}",
                hint=f"Available: {', '.join(registry)}" if registry else None,
            )
        )

    current = latest_tag(key, registry, repo)
    return Ok(BumpPlan(environment=env, current=current, next_tag=next_tag_name(env, current)))


def execute_bump(
    repo: TagSource,
    next_tag: str,
    annotation: str | None,
    console: ConsoleProtocol,
    *,
    remote: str = REMOTE,
) -> Result[None, BumpError]:
    """Create ``next_tag``, push it, then refetch all tags from ``remote``.

    A blank annotation creates a lightweight tag.
    """
    message = annotation.strip() if annotation else ""

    created = repo.create_tag(next_tag, message or None)
    if isinstance(created, Err):
        return Err(BumpError(kind="create_failed", message=created.error.message))
    console.success(f"Created tag {next_tag}")

    pushed = repo.push_tag(next_tag, remote)
    if isinstance(pushed, Err):
        return Err(
            BumpError(
                kind="push_failed",
                message=pushed.error.message,
                hint=f"Local tag {next_tag} was kept; retry with: git push {remote} {next_tag}",
            )
        )
    console.success(f"Pushed {next_tag} to {remote}")

    fetched = repo.fetch_tags(remote)
    if isinstance(fetched, Err):
        return Err(BumpError(kind="fetch_failed", message=fetched.error.message))
    console.info(f"✓ Fetched latest tags from {remote}")

    return Ok(None)
