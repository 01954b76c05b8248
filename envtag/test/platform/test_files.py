from __future__ import annotations

import os
from pathlib import Path

import pytest

from envtag.platform.files import atomic_write_text, remove_file


def test_atomic_write_text_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "nested" / ".tag-config.json"
    atomic_write_text(path, "{}\n")

    assert path.read_text(encoding="utf-8") == "{}\n"


def test_atomic_write_text_replaces_existing_content(tmp_path: Path) -> None:
    path = tmp_path / ".tag-config.json"
    path.write_text("old", encoding="utf-8")

    atomic_write_text(path, "new")

    assert path.read_text(encoding="utf-8") == "new"
    assert [p.name for p in tmp_path.iterdir()] == [".tag-config.json"]


def test_atomic_write_text_cleans_temp_file_on_replace_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / ".tag-config.json"
    path.write_text("old", encoding="utf-8")

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_text(path, "new")

    assert path.read_text(encoding="utf-8") == "old"
    assert [p.name for p in tmp_path.iterdir()] == [".tag-config.json"]


def test_remove_file(tmp_path: Path) -> None:
    path = tmp_path / ".tag-config.json"
    path.write_text("{}", encoding="utf-8")

    assert remove_file(path) is True
    assert not path.exists()
    assert remove_file(path) is False
