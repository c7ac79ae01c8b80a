"""Pull request host backed by the Actions event snapshot and the GitHub API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from ticketgate.domain.ports.host import ChangeRequestHost

if TYPE_CHECKING:
    from ticketgate.adapters.github.client import GitHubClient

    from .context import EventSnapshot

log = getLogger(__name__)


@dataclass(slots=True)
class ActionsChangeRequest:
    snapshot: EventSnapshot
    client: GitHubClient

    def get_event_title(self) -> str:
        return self.snapshot.title

    def get_event_body(self) -> str:
        return self.snapshot.body

    def get_branch_ref(self) -> str:
        return self.snapshot.branch

    async def update_body(self, body: str) -> None:
        await self.client.update_pull_request_body(body)

    async def post_comment(self, message: str) -> None:
        await self.client.create_comment(message)


@dataclass(slots=True)
class DryRunChangeRequest:
    """Reads the snapshot like ``ActionsChangeRequest`` but only logs the writes."""

    snapshot: EventSnapshot

    def get_event_title(self) -> str:
        return self.snapshot.title

    def get_event_body(self) -> str:
        return self.snapshot.body

    def get_branch_ref(self) -> str:
        return self.snapshot.branch

    async def update_body(self, body: str) -> None:
        log.info(f"[dry-run] Would update body of #{self.snapshot.number} to:\n{body}")

    async def post_comment(self, message: str) -> None:
        log.info(f"[dry-run] Would comment on #{self.snapshot.number}:\n{message}")


if TYPE_CHECKING:

    def _host_check(request: ActionsChangeRequest | DryRunChangeRequest) -> ChangeRequestHost:
        return request
