from __future__ import annotations

from envtag.core.registry import default_registry
from envtag.core.result import Err, Ok
from envtag.output.console import MockConsole
from envtag.services.bump import execute_bump, plan_bump
from envtag.test.fakes import FakeRepository


def test_first_tag_starts_from_zero() -> None:
    result = plan_bump("dev", default_registry(), FakeRepository())

    assert isinstance(result, Ok)
    assert result.value.current is None
    assert result.value.next_tag == "d0.0.1"


def test_next_tag_bumps_latest_patch() -> None:
    repo = FakeRepository.with_names("v1.2.3", "v1.2.10", "v1.3.0")
    result = plan_bump("prod", default_registry(), repo)

    assert isinstance(result, Ok)
    plan = result.value
    assert plan.current is not None and plan.current.name == "v1.3.0"
    assert plan.next_tag == "v1.3.1"
    assert plan.environment.label == "Production"


def test_multi_letter_prefix() -> None:
    repo = FakeRepository.with_names("preprod2.4.7")
    result = plan_bump("preprod", default_registry(), repo)
    assert isinstance(result, Ok) and result.value.next_tag == "preprod2.4.8"


def test_unknown_environment() -> None:
    result = plan_bump("qa", default_registry(), FakeRepository())

    assert isinstance(result, Err)
    assert result.error.kind == "unknown_environment"
    assert "prod" in (result.error.hint or "")


def test_failed_listing_plans_from_zero() -> None:
    repo = FakeRepository(fail={"list": "fatal: bad object"})
    result = plan_bump("staging", default_registry(), repo)
    assert isinstance(result, Ok) and result.value.next_tag == "s0.0.1"


def test_blank_annotation_creates_lightweight_tag() -> None:
    repo = FakeRepository()
    console = MockConsole()

    result = execute_bump(repo, "d0.0.1", "   ", console)

    assert isinstance(result, Ok)
    assert repo.calls == [("tag", "d0.0.1"), ("push", "origin", "d0.0.1"), ("fetch", "origin")]
    assert console.find("Created tag d0.0.1")
    assert console.find("Pushed d0.0.1 to origin")


def test_annotation_creates_annotated_tag_with_stripped_message() -> None:
    repo = FakeRepository()

    result = execute_bump(repo, "v1.0.1", "  Hotfix for login  ", MockConsole())

    assert isinstance(result, Ok)
    assert repo.calls[0] == ("tag", "-a", "v1.0.1", "Hotfix for login")


def test_none_annotation_creates_lightweight_tag() -> None:
    repo = FakeRepository()
    execute_bump(repo, "v1.0.1", None, MockConsole())
    assert repo.calls[0] == ("tag", "v1.0.1")


def test_create_failure_stops_before_push() -> None:
    repo = FakeRepository(fail={"tag": "fatal: tag 'd0.0.1' already exists"})

    result = execute_bump(repo, "d0.0.1", "", MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "create_failed"
    assert result.error.message == "fatal: tag 'd0.0.1' already exists"
    assert repo.commands() == ["tag"]


def test_push_failure_keeps_local_tag_and_skips_fetch() -> None:
    repo = FakeRepository(fail={"push": "error: failed to push some refs to 'origin'"})

    result = execute_bump(repo, "d0.1.18", "", MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "push_failed"
    assert "failed to push some refs" in result.error.message
    assert "d0.1.18" in repo.names
    assert repo.commands() == ["tag", "push"]


def test_fetch_failure_is_surfaced() -> None:
    repo = FakeRepository(fail={"fetch": "fatal: unable to access remote"})

    result = execute_bump(repo, "d0.0.1", "", MockConsole())

    assert isinstance(result, Err)
    assert result.error.kind == "fetch_failed"
    assert result.error.message == "fatal: unable to access remote"
