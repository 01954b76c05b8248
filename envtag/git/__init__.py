"""Git operations module.

Usage:
    from envtag.git import TagRepository

    repo = TagRepository(Path("/path/to/repo"))
    tags = repo.list_tags()
    if tags.is_ok():
        print(tags.unwrap())
"""

from envtag.git.repository import (
    GitError,
    TagRepository,
    TagSource,
    find_toplevel,
)

__all__ = [
    "GitError",
    "TagRepository",
    "TagSource",
    "find_toplevel",
]
