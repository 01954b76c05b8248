"""Environment tag versions: `<prefix><major>.<minor>.<patch>`.

Only three numeric components are supported and only the patch component
is ever bumped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Version",
    "ZERO",
    "compare",
    "decode",
    "format_version",
    "next_patch",
]

_VERSION_RE = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)$")


@dataclass(frozen=True, slots=True, order=True)
class Version:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return format_version(self)


ZERO = Version(0, 0, 0)


def decode(tag_name: str, prefix: str) -> Version | None:
    """Parse ``tag_name`` as ``prefix`` followed by exactly `M.m.p`.

    Returns None when the prefix does not match or anything precedes or
    follows the three numeric runs (``v1.2.3-rc1`` does not decode).
    """
    if not tag_name.startswith(prefix):
        return None
    m = _VERSION_RE.match(tag_name[len(prefix) :])
    if m is None:
        return None
    return Version(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def compare(a: Version, b: Version) -> int:
    """Negative if a < b, zero if equal, positive if a > b."""
    if a.major != b.major:
        return a.major - b.major
    if a.minor != b.minor:
        return a.minor - b.minor
    return a.patch - b.patch


def next_patch(v: Version) -> Version:
    return Version(v.major, v.minor, v.patch + 1)


def format_version(v: Version) -> str:
    return f"{v.major}.{v.minor}.{v.patch}"
