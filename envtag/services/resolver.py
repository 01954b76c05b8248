"""Latest tag per environment.

Lists the tags matching an environment's prefix, decodes their versions and
picks the highest one. A failing git query is reported as an outcome, not
raised: `tag list` must keep going when one environment cannot be read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from fnmatch import fnmatchcase

from envtag.core.registry import Environment
from envtag.core.result import Err, Ok
from envtag.git.repository import TagSource
from envtag.versioning import Version, decode

__all__ = [
    "TAG_FORMAT",
    "Found",
    "LatestLookup",
    "NoTags",
    "QueryFailed",
    "TagRecord",
    "UNKNOWN_AUTHOR",
    "UnknownEnvironment",
    "latest_tag",
    "parse_tag_lines",
    "resolve_latest",
    "tag_glob",
]

FIELD_SEPARATOR = "|"
TAG_FORMAT = FIELD_SEPARATOR.join(
    [
        "%(refname:short)",
        "%(taggername)",
        "%(taggerdate:relative)",
        "%(contents)",
    ]
)
UNKNOWN_AUTHOR = "unknown"


@dataclass(frozen=True, slots=True)
class TagRecord:
    """A decoded tag with its metadata.

    Attributes:
        name: Full tag name as listed by git (e.g. "v1.2.3")
        author: Tagger name, "unknown" for lightweight tags
        relative_age: Human phrase such as "3 days ago" (may be empty)
        annotation: Tag message (may be empty)
        version: Decoded version
    """

    name: str
    author: str
    relative_age: str
    annotation: str
    version: Version


@dataclass(frozen=True, slots=True)
class Found:
    record: TagRecord


@dataclass(frozen=True, slots=True)
class NoTags:
    pass


@dataclass(frozen=True, slots=True)
class UnknownEnvironment:
    key: str


@dataclass(frozen=True, slots=True)
class QueryFailed:
    reason: str


type LatestLookup = Found | NoTags | UnknownEnvironment | QueryFailed


def tag_glob(prefix: str) -> str:
    return f"{prefix}[0-9]*.[0-9]*.[0-9]*"


def _starts_record(line: str, prefix: str) -> bool:
    """True when ``line`` opens a new tag record.

    The name field must match the query glob and be a valid ref name (no
    whitespace). A message line such as "v2 notes | a | b | c" therefore
    continues the previous record. A message line that is itself shaped
    like a full record ("v2.0.0|x|y|z") is still read as a new one.
    """
    if line.count(FIELD_SEPARATOR) < 3:
        return False
    name = line.split(FIELD_SEPARATOR, 1)[0]
    if any(c.isspace() for c in name):
        return False
    return fnmatchcase(name, tag_glob(prefix))


def _split_records(output: str, prefix: str) -> list[list[str]]:
    """Group output lines into one list per tag.

    A multi-line tag message continues on the following lines until the
    next record starts.
    """
    chunks: list[list[str]] = []
    for line in output.splitlines():
        if _starts_record(line, prefix):
            chunks.append([line])
        elif chunks:
            chunks[-1].append(line)
    return chunks


def parse_tag_lines(output: str, prefix: str) -> list[TagRecord]:
    """Decode `TAG_FORMAT` output, dropping tags whose name does not decode.

    The message is everything after the third separator, rejoined, so
    messages containing `|` or newlines survive intact.
    """
    records: list[TagRecord] = []
    for chunk in _split_records(output, prefix):
        parts = "\n".join(chunk).split(FIELD_SEPARATOR)
        name = parts[0]
        version = decode(name, prefix)
        if version is None:
            continue
        records.append(
            TagRecord(
                name=name,
                author=parts[1] or UNKNOWN_AUTHOR,
                relative_age=parts[2],
                annotation=FIELD_SEPARATOR.join(parts[3:]).strip(),
                version=version,
            )
        )
    return records


def _latest(records: list[TagRecord]) -> TagRecord:
    # sorted() is stable: among equal versions the first listed wins.
    return sorted(records, key=lambda r: r.version, reverse=True)[0]


def resolve_latest(
    key: str,
    registry: Mapping[str, Environment],
    repo: TagSource,
) -> LatestLookup:
    env = registry.get(key)
    if env is None:
        return UnknownEnvironment(key)

    match repo.list_tags_formatted(tag_glob(env.prefix), TAG_FORMAT):
        case Err(e):
            return QueryFailed(e.message)
        case Ok(output):
            records = parse_tag_lines(output, env.prefix)

    if not records:
        return NoTags()
    return Found(_latest(records))


def latest_tag(
    key: str,
    registry: Mapping[str, Environment],
    repo: TagSource,
) -> TagRecord | None:
    """Latest tag for ``key``, or None for every non-found outcome."""
    match resolve_latest(key, registry, repo):
        case Found(record):
            return record
        case _:
            return None
