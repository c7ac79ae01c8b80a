from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.support.events import write_pull_request_event
from ticketgate.adapters.actions import branch_name_from_ref, read_event_snapshot
from ticketgate.config.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


def _write_event(
    tmp_path: Path, *, body: str | None = "Body", head: str | None = "feature/ABC-1"
) -> Path:
    return write_pull_request_event(tmp_path, title="Add thing (ABC-1)", branch=head, body=body)


@pytest.mark.parametrize(
    ("ref", "expected"),
    [
        ("refs/heads/feature/ABC-1-x", "feature/ABC-1-x"),
        ("refs/heads/main", "main"),
        ("refs/pull/12/merge", "12/merge"),
        ("main", "main"),
    ],
)
def test_branch_name_from_ref(ref: str, expected: str) -> None:
    assert branch_name_from_ref(ref) == expected


def test_snapshot_from_event_file(tmp_path: Path) -> None:
    snapshot = read_event_snapshot(_write_event(tmp_path))

    assert snapshot.repository == "octo/repo"
    assert snapshot.number == 12
    assert snapshot.title == "Add thing (ABC-1)"
    assert snapshot.body == "Body"
    assert snapshot.branch == "feature/ABC-1"


def test_null_body_reads_as_empty(tmp_path: Path) -> None:
    snapshot = read_event_snapshot(_write_event(tmp_path, body=None))

    assert snapshot.body == ""


def test_head_ref_env_wins_over_event(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_HEAD_REF", "fix/ABC-9")

    snapshot = read_event_snapshot(_write_event(tmp_path))

    assert snapshot.branch == "fix/ABC-9"


def test_falls_back_to_github_ref(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REF", "refs/heads/feature/ABC-2-y")

    snapshot = read_event_snapshot(_write_event(tmp_path, head=None))

    assert snapshot.branch == "feature/ABC-2-y"


def test_unknown_branch_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="branch name"):
        read_event_snapshot(_write_event(tmp_path, head=None))


def test_repository_env_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "other/fork")

    assert read_event_snapshot(_write_event(tmp_path)).repository == "other/fork"


def test_event_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(_write_event(tmp_path)))

    assert read_event_snapshot().number == 12


def test_missing_event_path_is_reported() -> None:
    with pytest.raises(ConfigurationError, match="GITHUB_EVENT_PATH"):
        read_event_snapshot()


def test_missing_event_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        read_event_snapshot(tmp_path / "absent.json")


def test_non_pull_request_event(tmp_path: Path) -> None:
    path = tmp_path / "push.json"
    path.write_text(json.dumps({"ref": "refs/heads/main"}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not a pull_request event"):
        read_event_snapshot(path)
