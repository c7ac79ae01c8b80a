"""HTTP client for the GitHub pull request endpoints used by the check."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from ticketgate.adapters.http_resilience import ResilientClient
from ticketgate.config.github import GitHubConfig, get_github_config

from .schema import CommentPayload

if TYPE_CHECKING:
    from ticketgate.adapters.http_resilience import ClientFactory
    from ticketgate.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API rejects a request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class GitHubClient:
    """Updates one pull request and comments on it."""

    repository: str
    number: int
    config: GitHubConfig = field(default_factory=get_github_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    @property
    def _repo_url(self) -> str:
        return f"{self.config.api_url}/repos/{self.repository}"

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.token}"}

    async def update_pull_request_body(self, body: str) -> None:
        url = f"{self._repo_url}/pulls/{self.number}"
        log.info(f"Updating body of {self.repository}#{self.number}")
        await self._perform_request("PATCH", url, payload={"body": body})

    async def create_comment(self, body: str) -> CommentPayload:
        url = f"{self._repo_url}/issues/{self.number}/comments"
        log.info(f"Commenting on {self.repository}#{self.number}")
        response = await self._perform_request("POST", url, payload={"body": body})
        return CommentPayload.model_validate(response.json())

    async def _perform_request(
        self,
        method: str,
        url: str,
        *,
        payload: dict[str, object],
    ) -> httpx.Response:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.request(method, url, json=payload, headers=self._headers())
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            log.error(f"GitHub API error {response.status_code}: {response.text}")
            raise GitHubAPIError(
                f"{method} {url} failed with HTTP {response.status_code}",
                status_code=response.status_code,
            ) from exc
        return response
