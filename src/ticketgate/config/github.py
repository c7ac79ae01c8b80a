"""GitHub REST API configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .env import require_inputs
from .http_resilience import ResilienceConfig, RetryPolicy

DEFAULT_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="github",
        timeout_seconds=15.0,
        # POST stays out: a retried comment would be posted twice.
        retry=RetryPolicy(total=2, allowed_methods=frozenset({"GET", "PATCH"})),
        default_headers={
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        },
    )


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds the GitHub token and API location."""

    token: str = field(repr=False)
    api_url: str = DEFAULT_GITHUB_API_URL
    resilience: ResilienceConfig = field(default_factory=_default_resilience)


def get_github_config(*, resilience: ResilienceConfig | None = None) -> GitHubConfig:
    values = require_inputs(("github-token",))
    api_url = os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL
    return GitHubConfig(
        token=values["github-token"],
        api_url=api_url.rstrip("/"),
        resilience=resilience or _default_resilience(),
    )
