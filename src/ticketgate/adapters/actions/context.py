"""Read the triggering pull request from the GitHub Actions runner environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

from pydantic import ValidationError

from ticketgate.adapters.github.schema import PullRequestEvent
from ticketgate.config.errors import ConfigurationError
from ticketgate.config.env import require_env_vars

log = getLogger(__name__)

# ``refs/heads/<branch>`` and ``refs/pull/<n>/merge`` both start with two segments.
_REF_PREFIX_SEGMENTS = 2


def branch_name_from_ref(ref: str) -> str:
    """Strip the two leading segments of a git ref (``refs/heads/a/b`` -> ``a/b``)."""

    segments = ref.strip().split("/")
    if len(segments) <= _REF_PREFIX_SEGMENTS:
        return ref.strip()
    return "/".join(segments[_REF_PREFIX_SEGMENTS:])


@dataclass(frozen=True, slots=True, kw_only=True)
class EventSnapshot:
    """Title, body and branch of the pull request, read once per run."""

    repository: str
    number: int
    title: str
    body: str
    branch: str


def load_event(path: Path) -> PullRequestEvent:
    try:
        return PullRequestEvent.model_validate_json(path.read_bytes())
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Event payload not found: {path}") from exc
    except ValidationError as exc:
        raise ConfigurationError(
            f"{path} is not a pull_request event payload: {exc.error_count()} errors"
        ) from exc


def resolve_branch(event: PullRequestEvent) -> str:
    head_ref = os.getenv("GITHUB_HEAD_REF")
    if head_ref and head_ref.strip():
        return head_ref.strip()
    if event.pull_request.head is not None:
        return event.pull_request.head.ref
    ref = os.getenv("GITHUB_REF")
    if ref is None or not ref.strip():
        raise ConfigurationError(
            "Cannot determine the branch name: GITHUB_HEAD_REF and GITHUB_REF are unset"
        )
    return branch_name_from_ref(ref)


def read_event_snapshot(event_path: Path | None = None) -> EventSnapshot:
    """Build the snapshot from ``GITHUB_EVENT_PATH`` (or ``event_path``)."""

    if event_path is None:
        event_path = Path(require_env_vars(("GITHUB_EVENT_PATH",))["GITHUB_EVENT_PATH"])
    event = load_event(event_path)

    repository = os.getenv("GITHUB_REPOSITORY")
    if not repository and event.repository is not None:
        repository = event.repository.full_name
    if not repository:
        raise ConfigurationError("Cannot determine the repository: GITHUB_REPOSITORY is unset")

    snapshot = EventSnapshot(
        repository=repository,
        number=event.pull_request.number,
        title=event.pull_request.title,
        body=event.pull_request.body,
        branch=resolve_branch(event),
    )
    log.debug(f"Loaded {snapshot.repository}#{snapshot.number} on branch {snapshot.branch}")
    return snapshot


__all__ = [
    "EventSnapshot",
    "branch_name_from_ref",
    "load_event",
    "read_event_snapshot",
    "resolve_branch",
]
