"""Git tag operations for a single repository.

All operations return Result types. A failing git call is reported with
git's own stderr so the user sees the real diagnostic.

Usage:
    repo = TagRepository(Path("/path/to/repo"))

    match repo.list_tags():
        case Ok(tags):
            print(", ".join(tags))
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from envtag.core.result import Err, Ok, Result
from envtag.core.settings import REMOTE
from envtag.platform.process import ProcessError
from envtag.platform.process import run as run_process

__all__ = [
    "GitError",
    "TagRepository",
    "TagSource",
    "find_toplevel",
]

# Fetch every remote tag, overwriting local tags that diverged from it.
_FORCE_TAGS_REFSPEC = "+refs/tags/*:refs/tags/*"


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "push")
        message: git's stderr, verbatim apart from surrounding whitespace
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class TagSource(Protocol):
    """The git capabilities the tag services depend on."""

    def list_tags(self) -> Result[list[str], GitError]: ...

    def list_tags_formatted(self, pattern: str, fmt: str) -> Result[str, GitError]: ...

    def create_tag(self, name: str, message: str | None = None) -> Result[None, GitError]: ...

    def push_tag(self, name: str, remote: str = REMOTE) -> Result[None, GitError]: ...

    def fetch_tags(self, remote: str = REMOTE) -> Result[None, GitError]: ...


class TagRepository:
    """Tag-level git operations on the repository at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def list_tags(self) -> Result[list[str], GitError]:
        """List every tag name, in git's native order.

        Runs `git tag --list`.
        """
        match self._git("tag", ["tag", "--list"]):
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok([line.strip() for line in stdout.splitlines() if line.strip()])

    def list_tags_formatted(self, pattern: str, fmt: str) -> Result[str, GitError]:
        """List tags matching a glob, one formatted record per tag.

        Args:
            pattern: Glob passed to `git tag --list`
            fmt: `--format` template (for-each-ref field syntax)

        Returns:
            Ok(raw output) on success, Err(GitError) on failure
        """
        return self._git("tag", ["tag", "--list", pattern, "--format", fmt])

    def create_tag(self, name: str, message: str | None = None) -> Result[None, GitError]:
        """Create a tag at HEAD.

        An annotated tag is created when ``message`` is given, a lightweight
        tag otherwise.
        """
        args = ["tag", "-a", name, "-m", message] if message is not None else ["tag", name]
        return self._git("tag", args).map(lambda _: None)

    def push_tag(self, name: str, remote: str = REMOTE) -> Result[None, GitError]:
        """Push a single tag to ``remote``."""
        return self._git("push", ["push", remote, name]).map(lambda _: None)

    def fetch_tags(self, remote: str = REMOTE) -> Result[None, GitError]:
        """Fetch all tags from ``remote``, force-updating diverged local tags."""
        return self._git("fetch", ["fetch", remote, _FORCE_TAGS_REFSPEC]).map(lambda _: None)

    def _git(self, command: str, args: list[str]) -> Result[str, GitError]:
        result = run_process(["git", *args], cwd=self.path)
        match result:
            case Err(e):
                return Err(_to_git_error(command, e))
            case Ok(stdout):
                return Ok(stdout)


def find_toplevel(path: Path) -> Path | None:
    """Return the root of the work tree containing ``path``, if any."""
    result = run_process(["git", "rev-parse", "--show-toplevel"], cwd=path)
    match result:
        case Ok(stdout):
            top = stdout.strip()
            return Path(top) if top else None
        case Err(_):
            return None


def _to_git_error(command: str, e: ProcessError) -> GitError:
    message = e.stderr.strip() or e.stdout.strip() or f"git {command} failed"
    return GitError(command=command, message=message, returncode=e.returncode)
