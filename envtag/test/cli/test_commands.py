from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import envtag.cli.context as context_mod
from envtag import __version__
from envtag.cli.app import app
from envtag.core.settings import CONFIG_FILENAME, ROOT_ENV_VAR
from envtag.test.fakes import FakeRepository, FakeTag

runner = CliRunner()


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeRepository:
    fake = FakeRepository()
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path))
    monkeypatch.setattr(context_mod, "TagRepository", lambda _root: fake)
    return fake


def _write_config(root: Path, data: dict[str, dict[str, str]]) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


class TestList:
    def test_defaults_without_tags(self, repo: FakeRepository) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert result.output.count("(no tags found)") == 5
        assert "Production (prod) -" in result.output
        assert "Dev (dev) -" in result.output

    def test_latest_tag_with_annotation(self, repo: FakeRepository, tmp_path: Path) -> None:
        _write_config(tmp_path, {"staging": {"label": "Staging", "prefix": "s", "description": "QA"}})
        repo.tags = [
            FakeTag("s0.1.9", tagger="Ada", age="3 weeks ago", message="Old"),
            FakeTag("s0.1.10", tagger="Ada", age="2 days ago", message="New search"),
        ]

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Staging (staging): s0.1.10 - QA" in result.output
        assert "New search · Ada · 2 days ago" in result.output

    def test_query_failure_degrades_to_no_tags(self, repo: FakeRepository) -> None:
        repo.fail["list"] = "fatal: not a git repository"

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert result.output.count("(no tags found)") == 5

    def test_malformed_config_warns_and_uses_defaults(
        self, repo: FakeRepository, tmp_path: Path
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("{oops", encoding="utf-8")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "using defaults" in result.output
        assert "Sandbox (sandbox)" in result.output

    def test_empty_config(self, repo: FakeRepository, tmp_path: Path) -> None:
        _write_config(tmp_path, {})

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "No environments configured" in result.output


class TestBump:
    def test_creates_pushes_and_refetches(self, repo: FakeRepository) -> None:
        repo.tags = [FakeTag("d0.1.16"), FakeTag("d0.1.17")]

        result = runner.invoke(app, ["bump", "dev"], input="Ship it\n")

        assert result.exit_code == 0, result.output
        assert "Current latest: d0.1.17" in result.output
        assert "Next tag:       d0.1.18" in result.output
        assert repo.calls[-3:] == [
            ("tag", "-a", "d0.1.18", "Ship it"),
            ("push", "origin", "d0.1.18"),
            ("fetch", "origin"),
        ]

    def test_first_tag(self, repo: FakeRepository) -> None:
        result = runner.invoke(app, ["bump", "staging"], input="\n")

        assert result.exit_code == 0, result.output
        assert "Current latest: (none)" in result.output
        assert ("tag", "s0.0.1") in repo.calls

    def test_push_failure_exits_non_zero_and_keeps_tag(self, repo: FakeRepository) -> None:
        repo.tags = [FakeTag("d0.1.17")]
        repo.fail["push"] = "error: failed to push some refs to 'origin'"

        result = runner.invoke(app, ["bump", "dev"], input="\n")

        assert result.exit_code != 0
        assert "failed to push some refs" in result.output
        assert "d0.1.18" in repo.names
        assert "fetch" not in repo.commands()

    def test_create_failure_exits_non_zero(self, repo: FakeRepository) -> None:
        repo.fail["tag"] = "fatal: tag 'v0.0.1' already exists"

        result = runner.invoke(app, ["bump", "prod"], input="\n")

        assert result.exit_code == 2
        assert "already exists" in result.output
        assert "push" not in repo.commands()

    def test_prompts_for_unknown_environment(self, repo: FakeRepository) -> None:
        result = runner.invoke(app, ["bump", "qa"], input="5\n\n")

        assert result.exit_code == 0, result.output
        assert "Which environment do you want to tag?" in result.output
        assert "dev (Dev)" in result.output
        assert ("tag", "d0.0.1") in repo.calls

    def test_prints_description_after_push(self, repo: FakeRepository, tmp_path: Path) -> None:
        _write_config(tmp_path, {"prod": {"label": "Production", "prefix": "v", "description": "Live"}})

        result = runner.invoke(app, ["bump"], input="1\n\n")

        assert result.exit_code == 0, result.output
        assert result.output.rstrip().endswith("Live")


class TestSetup:
    def test_accepting_nothing_keeps_config(self, repo: FakeRepository, tmp_path: Path) -> None:
        path = _write_config(tmp_path, {"prod": {"label": "Production", "prefix": "v"}})
        before = path.read_text(encoding="utf-8")
        repo.tags = [FakeTag("d0.1.16"), FakeTag("d0.1.17"), FakeTag("V1.0.0")]

        result = runner.invoke(app, ["setup"], input="n\nn\n")

        assert result.exit_code == 0, result.output
        assert "No configuration saved." in result.output
        assert path.read_text(encoding="utf-8") == before

    def test_saves_accepted_prefix(self, repo: FakeRepository, tmp_path: Path) -> None:
        repo.tags = [FakeTag("s1.0.0")]

        result = runner.invoke(app, ["setup"], input="y\nStaging\nQA team\ny\n")

        assert result.exit_code == 0, result.output
        saved = json.loads((tmp_path / CONFIG_FILENAME).read_text(encoding="utf-8"))
        assert saved == {"s": {"label": "Staging", "prefix": "s", "description": "QA team"}}


class TestRefresh:
    def test_success(self, repo: FakeRepository) -> None:
        result = runner.invoke(app, ["refresh"])

        assert result.exit_code == 0
        assert repo.calls == [("fetch", "origin")]

    def test_failure_exits_non_zero(self, repo: FakeRepository) -> None:
        repo.fail["fetch"] = "fatal: Could not read from remote repository."

        result = runner.invoke(app, ["refresh"])

        assert result.exit_code == 4
        assert "Could not read from remote repository." in result.output


class TestReset:
    def test_declined(self, repo: FakeRepository, tmp_path: Path) -> None:
        path = _write_config(tmp_path, {})

        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert "Reset cancelled." in result.output
        assert path.exists()

    def test_confirmed(self, repo: FakeRepository, tmp_path: Path) -> None:
        path = _write_config(tmp_path, {})

        result = runner.invoke(app, ["reset"], input="y\n")

        assert result.exit_code == 0
        assert not path.exists()

    def test_nothing_to_reset(self, repo: FakeRepository) -> None:
        result = runner.invoke(app, ["reset"])

        assert result.exit_code == 0
        assert "No configuration file found" in result.output


def test_repo_option_selects_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    fake = FakeRepository()
    roots: list[Path] = []

    def factory(root: Path) -> FakeRepository:
        roots.append(root)
        return fake

    monkeypatch.setenv(ROOT_ENV_VAR, "")
    monkeypatch.setattr(context_mod, "TagRepository", factory)
    _write_config(tmp_path, {"qa": {"label": "QA", "prefix": "q"}})

    result = runner.invoke(app, ["--repo", str(tmp_path), "list"])

    assert result.exit_code == 0
    assert roots == [tmp_path.resolve()]
    assert "QA (qa) -" in result.output
