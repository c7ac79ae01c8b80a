"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubClient
from .schema import CommentPayload, PullRequestEvent, PullRequestPayload

__all__ = [
    "CommentPayload",
    "GitHubAPIError",
    "GitHubClient",
    "PullRequestEvent",
    "PullRequestPayload",
]
