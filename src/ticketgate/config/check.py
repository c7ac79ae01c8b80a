"""Ticket check settings loaded from the action inputs."""

from __future__ import annotations

from ticketgate.domain.pipeline import PipelineSettings
from ticketgate.domain.types import DEFAULT_FLAGS, ExtractionRule

from .env import get_input
from .errors import MissingConfigurationError
from .jira import normalize_domain

# Older workflows configure the title pattern under its original input name.
LEGACY_TITLE_REGEX_INPUT = "ticket-regex"
# Consumed by get_jira_config and get_github_config.
CREDENTIAL_INPUTS = ("atlassian-token", "github-token")


def _title_pattern() -> str | None:
    return get_input("title-regex") or get_input(LEGACY_TITLE_REGEX_INPUT)


def get_pipeline_settings() -> PipelineSettings:
    """Compile the extraction rules and gather the optional conventions.

    Raises ``MissingConfigurationError`` naming every absent required input and
    ``ConfigurationError`` for patterns that cannot capture a ticket.
    """

    inputs = {name: get_input(name) for name in CREDENTIAL_INPUTS}
    inputs |= {
        "atlassian-domain": get_input("atlassian-domain"),
        "branch-name-regex": get_input("branch-name-regex"),
        "title-regex": _title_pattern(),
    }
    missing = sorted(name for name, value in inputs.items() if value is None)
    if missing:
        raise MissingConfigurationError(f"Missing required inputs: {', '.join(missing)}")
    required = {name: value for name, value in inputs.items() if value is not None}

    return PipelineSettings(
        title_rule=ExtractionRule(
            pattern=required["title-regex"],
            flags=get_input("title-regex-flags") or DEFAULT_FLAGS,
            delimiter=get_input("title-ticket-delimiter", strip=False),
        ),
        branch_rule=ExtractionRule(
            pattern=required["branch-name-regex"],
            flags=get_input("branch-name-regex-flags") or DEFAULT_FLAGS,
            delimiter=get_input("branch-name-ticket-delimiter", strip=False),
        ),
        tracker_domain=normalize_domain(required["atlassian-domain"]),
        title_comment=get_input("title-comment"),
        branch_comment=get_input("branch-name-comment"),
        body_ticket_prefix=get_input("body-ticket-prefix"),
    )
