"""Tag prefix discovery.

Groups every versioned tag in the repository by its alphabetic prefix so
`tag setup` can offer each prefix as a candidate environment.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from envtag.core.result import Err, Ok, Result
from envtag.git.repository import GitError, TagSource

__all__ = ["MAX_EXAMPLES", "PrefixGroup", "detect", "detect_prefixes"]

MAX_EXAMPLES = 3

# Anything after the numeric run (build suffixes etc.) is ignored.
_PREFIXED_TAG_RE = re.compile(r"^([A-Za-z]+)([0-9]+\.[0-9]+\.[0-9]+)")


@dataclass(slots=True)
class PrefixGroup:
    prefix: str
    examples: list[str] = field(default_factory=list)


def detect(tag_names: Iterable[str]) -> dict[str, PrefixGroup]:
    """Group tag names by prefix, alphabetically ordered by prefix.

    Grouping is case-sensitive (`V` and `v` are distinct). Each group keeps
    the first `MAX_EXAMPLES` names in listing order.
    """
    groups: dict[str, PrefixGroup] = {}
    for name in tag_names:
        m = _PREFIXED_TAG_RE.match(name)
        if m is None:
            continue
        group = groups.setdefault(m.group(1), PrefixGroup(prefix=m.group(1)))
        if len(group.examples) < MAX_EXAMPLES:
            group.examples.append(name)

    return {prefix: groups[prefix] for prefix in sorted(groups)}


def detect_prefixes(repo: TagSource) -> Result[dict[str, PrefixGroup], GitError]:
    match repo.list_tags():
        case Err(e):
            return Err(e)
        case Ok(names):
            return Ok(detect(names))
