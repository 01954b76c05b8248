"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["atomic_write_text", "remove_file"]


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one rename.

    A reader sees either the previous file or the complete new one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        newline="\n",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as handle:
        tmp_path = Path(handle.name)
        handle.write(content)

    try:
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


def remove_file(path: Path) -> bool:
    """Delete ``path``. Returns False if there was nothing to delete."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True
