"""Interactive environment setup from the repository's existing tags."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from envtag.core.registry import Environment, EnvironmentRegistry, save_registry
from envtag.core.result import Err, Ok, Result
from envtag.core.settings import REMOTE
from envtag.git.repository import TagSource
from envtag.output.console import ConsoleProtocol, Style
from envtag.output.prompts import PromptProvider
from envtag.services.prefixes import PrefixGroup, detect_prefixes

__all__ = ["SetupError", "SetupOutcome", "SetupService", "build_registry", "default_label"]

SetupOutcome = Literal["saved", "nothing_accepted", "no_prefixes"]


@dataclass(frozen=True, slots=True)
class SetupError:
    message: str
    hint: str | None = None


def default_label(prefix: str) -> str:
    return prefix[:1].upper() + prefix[1:]


def build_registry(
    groups: dict[str, PrefixGroup],
    prompts: PromptProvider,
    console: ConsoleProtocol,
) -> EnvironmentRegistry:
    """Ask about each prefix in turn and collect the accepted environments.

    Keys are the lowercased prefix, so `V` and `v` end up under the same
    key; the later one replaces the earlier and a warning is printed.
    """
    envs: dict[str, Environment] = {}

    for prefix in sorted(groups):
        examples = groups[prefix].examples
        console.print(f'\nPrefix "{prefix.upper()}"', Style.INFO)
        if examples:
            console.print(f"  Examples: {', '.join(examples)}", Style.DIM)

        if not prompts.confirm(f'Configure prefix "{prefix}"?', default=True):
            console.print(f'  Skipped prefix "{prefix}"', Style.DIM)
            continue

        name = prompts.text("Name:", default=default_label(prefix))
        description = prompts.text("Description (optional):").strip()

        if not prompts.confirm(f'Confirm "{name}" for prefix "{prefix}"?', default=True):
            continue

        key = prefix.lower()
        if key in envs:
            console.warning(
                f'prefix "{prefix}" replaces "{envs[key].prefix}" under key "{key}"'
            )
        envs[key] = Environment(
            key=key,
            label=name,
            prefix=prefix,
            description=description or None,
        )

    return EnvironmentRegistry(envs)


class SetupService:
    def __init__(
        self,
        *,
        repo: TagSource,
        config_path: Path,
        console: ConsoleProtocol,
        prompts: PromptProvider,
        remote: str = REMOTE,
    ) -> None:
        self._repo = repo
        self._config_path = config_path
        self._console = console
        self._prompts = prompts
        self._remote = remote

    def run(self) -> Result[SetupOutcome, SetupError]:
        """Fetch, detect prefixes, ask, and save if anything was accepted.

        An all-skip run never touches an existing config file.
        """
        self._console.info(f"Fetching tags from {self._remote}...")
        match self._repo.fetch_tags(self._remote):
            case Err(e):
                self._console.warning(f"Could not fetch tags: {e.message}")
            case Ok(_):
                self._console.success("Tags fetched successfully")
        self._console.newline()

        groups: dict[str, PrefixGroup] = {}
        match detect_prefixes(self._repo):
            case Err(e):
                self._console.warning(f"Could not list tags: {e.message}")
            case Ok(found):
                groups = found

        if not groups:
            self._console.print(
                "No tags with version patterns found. Using default configuration.",
                Style.WARNING,
            )
            return Ok("no_prefixes")

        self._console.header("Found tag prefixes:")
        for prefix, group in groups.items():
            self._console.print(f"  {prefix.upper()}: {', '.join(group.examples)}")

        registry = build_registry(groups, self._prompts, self._console)

        if not registry:
            self._console.print("\nNo configuration saved.", Style.WARNING)
            return Ok("nothing_accepted")

        saved = save_registry(registry, self._config_path)
        if isinstance(saved, Err):
            return Err(SetupError(message=saved.error.message))

        self._console.success(f"Configuration saved to {self._config_path.name}")
        self._console.print("Run `tag list` to see your configured environments.", Style.DIM)
        return Ok("saved")
