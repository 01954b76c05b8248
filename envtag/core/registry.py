"""Environment registry: environment key -> tag prefix, label, description.

The registry is persisted as a JSON object in `.tag-config.json`:

    {
      "prod": {"label": "Production", "prefix": "v", "description": "..."},
      "dev": {"label": "Dev", "prefix": "d"}
    }

A missing or unusable file is never fatal: the five built-in environments
are used instead. The registry is passed explicitly to whatever needs it.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from envtag.platform.files import atomic_write_text, remove_file

from .result import Err, Ok, Result
from .structured import as_str_dict, get_str

if TYPE_CHECKING:
    from envtag.output.console import ConsoleProtocol

__all__ = [
    "DEFAULT_ENVIRONMENTS",
    "ConfigError",
    "Environment",
    "EnvironmentRegistry",
    "ResetOutcome",
    "default_registry",
    "dump_registry",
    "load_registry",
    "parse_registry",
    "read_registry",
    "reset_registry",
    "save_registry",
]

ResetOutcome = Literal["deleted", "cancelled", "missing"]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be read, parsed, written or deleted."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Environment:
    """A deployment target with its own tag sequence.

    Attributes:
        key: Stable identifier (mapping key in the config file)
        label: Display name
        prefix: Non-empty tag prefix, e.g. "v" for v1.2.3
        description: Optional free text shown by `tag list`
    """

    key: str
    label: str
    prefix: str
    description: str | None = None

    def to_json(self) -> dict[str, str]:
        out = {"label": self.label, "prefix": self.prefix}
        if self.description:
            out["description"] = self.description
        return out


class EnvironmentRegistry(Mapping[str, Environment]):
    """Read-only, insertion-ordered mapping of key -> Environment."""

    def __init__(self, environments: Mapping[str, Environment] | None = None) -> None:
        self._envs: dict[str, Environment] = dict(environments or {})

    @classmethod
    def of(cls, *environments: Environment) -> EnvironmentRegistry:
        return cls({env.key: env for env in environments})

    def __getitem__(self, key: str) -> Environment:
        return self._envs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._envs)

    def __len__(self) -> int:
        return len(self._envs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnvironmentRegistry):
            return list(self._envs.items()) == list(other._envs.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"EnvironmentRegistry({list(self._envs)!r})"


DEFAULT_ENVIRONMENTS: tuple[Environment, ...] = (
    Environment(key="prod", label="Production", prefix="v"),
    Environment(key="sandbox", label="Sandbox", prefix="x"),
    Environment(key="preprod", label="Preprod", prefix="preprod"),
    Environment(key="staging", label="Staging", prefix="s"),
    Environment(key="dev", label="Dev", prefix="d"),
)


def default_registry() -> EnvironmentRegistry:
    return EnvironmentRegistry.of(*DEFAULT_ENVIRONMENTS)


def parse_registry(data: object) -> Result[EnvironmentRegistry, ConfigError]:
    """Validate decoded JSON and build a registry from it.

    Every entry needs a string `label` and a non-empty `prefix`; an empty
    prefix would make every tag decode for that environment.
    """
    table = as_str_dict(data)
    if table is None:
        return Err(ConfigError("expected a JSON object of environments"))

    envs: dict[str, Environment] = {}
    for key, raw in table.items():
        entry = as_str_dict(raw)
        if entry is None:
            return Err(ConfigError(f"environment '{key}' must be an object"))
        label = entry.get("label")
        prefix = entry.get("prefix")
        if not isinstance(label, str):
            return Err(ConfigError(f"environment '{key}' has no label"))
        # Stored verbatim, never stripped.
        if not isinstance(prefix, str) or not prefix.strip():
            return Err(ConfigError(f"environment '{key}' has no prefix"))
        envs[key] = Environment(
            key=key,
            label=label,
            prefix=prefix,
            description=get_str(entry, "description"),
        )
    return Ok(EnvironmentRegistry(envs))


def read_registry(path: Path) -> Result[EnvironmentRegistry | None, ConfigError]:
    """Read the config file. Ok(None) means there is no file."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Ok(None)
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"cannot read: {e}", path))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ConfigError(f"invalid JSON: {e}", path))

    return parse_registry(data).map_err(lambda err: ConfigError(err.message, path))


def load_registry(path: Path, console: ConsoleProtocol) -> EnvironmentRegistry:
    """Load the persisted registry, falling back to the defaults.

    A missing file falls back silently; an unreadable or invalid one falls
    back with a warning.
    """
    match read_registry(path):
        case Ok(None):
            return default_registry()
        case Ok(registry):
            return registry
        case Err(e):
            console.warning(
                f"Could not load config from {path.name} ({e.message}), using defaults"
            )
            return default_registry()


def dump_registry(registry: Mapping[str, Environment]) -> str:
    data = {key: env.to_json() for key, env in registry.items()}
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_registry(registry: Mapping[str, Environment], path: Path) -> Result[None, ConfigError]:
    """Overwrite the config file with ``registry``."""
    try:
        atomic_write_text(path, dump_registry(registry))
    except OSError as e:
        return Err(ConfigError(f"cannot write {path.name}: {e}", path))
    return Ok(None)


def reset_registry(path: Path, confirm: Callable[[str], bool]) -> Result[ResetOutcome, ConfigError]:
    """Delete the config file after confirmation.

    No prompt is shown when there is nothing to delete.
    """
    if not path.exists():
        return Ok("missing")

    if not confirm(f"Are you sure you want to delete {path.name}?"):
        return Ok("cancelled")

    try:
        removed = remove_file(path)
    except OSError as e:
        return Err(ConfigError(f"cannot delete {path.name}: {e}", path))
    return Ok("deleted" if removed else "missing")
