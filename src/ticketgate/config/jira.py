"""Jira configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import require_inputs
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

JIRA_TIMEOUT_SECONDS = 10.0


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="jira",
        timeout_seconds=JIRA_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        retry=RetryPolicy(total=2),
        default_headers={"Accept": "application/json"},
    )


def normalize_domain(value: str) -> str:
    """Reduce ``value`` to a bare hostname (scheme and trailing slashes removed)."""

    domain = value.strip()
    for scheme in ("https://", "http://"):
        if domain.lower().startswith(scheme):
            domain = domain[len(scheme) :]
    return domain.rstrip("/")


@dataclass(frozen=True, slots=True)
class JiraConfig:
    """Holds the Jira site and the credential used for issue lookups."""

    domain: str
    token: str = field(repr=False)
    resilience: ResilienceConfig = field(default_factory=_default_resilience)

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}"


def get_jira_config(*, resilience: ResilienceConfig | None = None) -> JiraConfig:
    values = require_inputs(("atlassian-domain", "atlassian-token"))
    return JiraConfig(
        domain=normalize_domain(values["atlassian-domain"]),
        token=values["atlassian-token"],
        resilience=resilience or _default_resilience(),
    )
