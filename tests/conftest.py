from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tests.support.values import BRANCH_PATTERN, DOMAIN, TITLE_PATTERN
from ticketgate.config.env import input_env_name
from ticketgate.domain.pipeline import PipelineSettings
from ticketgate.domain.types import ExtractionRule

if TYPE_CHECKING:
    from collections.abc import Callable


RUNNER_VARIABLES = (
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_HEAD_REF",
    "GITHUB_OUTPUT",
    "GITHUB_REF",
    "GITHUB_REPOSITORY",
)


@pytest.fixture(autouse=True)
def _isolate_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)
    for name in RUNNER_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def title_rule() -> ExtractionRule:
    return ExtractionRule(pattern=TITLE_PATTERN)


@pytest.fixture
def branch_rule() -> ExtractionRule:
    return ExtractionRule(pattern=BRANCH_PATTERN)


@pytest.fixture
def settings(title_rule: ExtractionRule, branch_rule: ExtractionRule) -> PipelineSettings:
    return PipelineSettings(
        title_rule=title_rule,
        branch_rule=branch_rule,
        tracker_domain=DOMAIN,
    )


@pytest.fixture
def set_inputs(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    def apply(**inputs: str) -> None:
        for name, value in inputs.items():
            monkeypatch.setenv(input_env_name(name.replace("_", "-")), value)

    return apply


@pytest.fixture
def required_inputs(set_inputs: Callable[..., None]) -> None:
    set_inputs(
        github_token="gh-token",
        atlassian_token="me@example.com:jira-token",
        atlassian_domain=DOMAIN,
        title_regex=TITLE_PATTERN,
        branch_name_regex=BRANCH_PATTERN,
    )
