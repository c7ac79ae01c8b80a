"""HTTP client for the Jira issue lookup endpoint."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ticketgate.adapters.http_resilience import ResilientClient
from ticketgate.config.jira import JiraConfig, get_jira_config
from ticketgate.domain.ports.tracker import TicketLookup
from ticketgate.domain.verification import Found, NotFound, TransportError

from .schema import IssuePayload, parse_error_text

if TYPE_CHECKING:
    from ticketgate.adapters.http_resilience import ClientFactory
    from ticketgate.config.http_resilience import ResilienceConfig
    from ticketgate.domain.types import TicketId
    from ticketgate.domain.verification import VerificationOutcome

log = getLogger(__name__)

ISSUE_PATH = "/rest/api/3/issue/{ticket}"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def basic_authorization(credential: str) -> str:
    """Encode ``credential`` (usually ``email:api-token``) as a Basic auth header value."""

    encoded = base64.b64encode(credential.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


@dataclass(slots=True)
class JiraClient:
    """Verifies tickets against ``GET /rest/api/3/issue/{ticket}``.

    Classification is by status code only: 200 is found, 404 is not found and
    anything else (including transport exceptions) is a transport error carrying
    the raw response text.
    """

    config: JiraConfig = field(default_factory=get_jira_config)
    client_factory: ClientFactory = field(default=_default_client_factory)

    async def __call__(self, ticket: TicketId) -> VerificationOutcome:
        return await self.verify(ticket)

    async def verify(self, ticket: TicketId) -> VerificationOutcome:
        url = self.config.base_url + ISSUE_PATH.format(ticket=quote(ticket, safe=""))
        headers = {
            "Authorization": basic_authorization(self.config.token),
            "Accept": "application/json",
        }
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            log.error(f"JIRA request for {ticket} failed: {exc!r}")
            return TransportError(ticket=ticket, detail=str(exc) or type(exc).__name__)

        if response.status_code == httpx.codes.OK:
            self._log_found(ticket, response)
            return Found(ticket=ticket)
        if response.status_code == httpx.codes.NOT_FOUND:
            reason = parse_error_text(response.text)
            log.info(f"JIRA ticket {ticket} not found" + (f": {reason}" if reason else ""))
            return NotFound(ticket=ticket)
        return TransportError(
            ticket=ticket,
            detail=response.text,
            status_code=response.status_code,
        )

    @staticmethod
    def _log_found(ticket: TicketId, response: httpx.Response) -> None:
        try:
            issue = IssuePayload.model_validate_json(response.content)
        except ValidationError:
            log.debug(f"JIRA ticket {ticket} found, payload not parsed")
            return
        if issue.key != ticket:
            # Jira follows moved issues and answers with the new key.
            log.warning(f"JIRA ticket {ticket} resolved to {issue.key}")
        log.debug(f"JIRA ticket {issue.key}: {issue.fields.summary}")


if TYPE_CHECKING:
    _lookup_check: TicketLookup = JiraClient()
