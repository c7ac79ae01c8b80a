"""Failure taxonomy for the ticket check pipeline.

Every stage failure is a ``TicketCheckError``. ``code`` is the machine-readable
classification published to the host (``None`` for unclassified faults) and
``remediation`` is the optional human-facing text posted back on the pull request.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import TicketId, TicketSet


class ErrorCode(StrEnum):
    INVALID_TITLE = "invalid-title"
    INVALID_BRANCH_NAME = "invalid-branch-name"
    BRANCH_TICKET_DIFFERS_TITLE_TICKET = "branch-ticket-differs-title-ticket"
    UNKNOWN_JIRA_TICKET = "unknown-jira-ticket"
    TICKET_MISSING_IN_BODY = "ticket-missing-in-body"


class TicketCheckError(Exception):
    """Base class for failures that end a ticket check run."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        remediation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.remediation = remediation

    @property
    def commentable(self) -> bool:
        return self.remediation is not None


class ExtractionError(TicketCheckError):
    """Raised when no ticket can be extracted from a text source."""


class NoMatchError(ExtractionError):
    """The pattern did not match the text at all."""


class MissingCaptureGroupError(ExtractionError):
    """The pattern matched but its named group captured nothing."""


class InconsistentTicketsError(TicketCheckError):
    def __init__(self, *, only_in_title: TicketSet, only_in_branch: TicketSet) -> None:
        parts: list[str] = []
        if only_in_title:
            parts.append(f"only in title: {only_in_title}")
        if only_in_branch:
            parts.append(f"only in branch name: {only_in_branch}")
        super().__init__(
            "Branch name tickets differ from title tickets (" + "; ".join(parts) + ")",
            code=ErrorCode.BRANCH_TICKET_DIFFERS_TITLE_TICKET,
        )
        self.only_in_title = only_in_title
        self.only_in_branch = only_in_branch


class UnknownTicketError(TicketCheckError):
    def __init__(self, ticket: TicketId) -> None:
        super().__init__(f"Unknown JIRA ticket: {ticket}", code=ErrorCode.UNKNOWN_JIRA_TICKET)
        self.ticket = ticket


class TrackerTransportError(TicketCheckError):
    """The tracker answered with an unexpected status or could not be reached."""

    def __init__(self, ticket: TicketId, detail: str, *, status_code: int | None = None) -> None:
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"JIRA lookup for {ticket} failed{status}: {detail}")
        self.ticket = ticket
        self.detail = detail
        self.status_code = status_code


class TicketMissingInBodyError(TicketCheckError):
    def __init__(self, ticket: TicketId, prefix: str) -> None:
        super().__init__(
            f"The PR body contains {prefix!r} but not the ticket {ticket} after it",
            code=ErrorCode.TICKET_MISSING_IN_BODY,
        )
        self.ticket = ticket
        self.prefix = prefix


__all__ = [
    "ErrorCode",
    "ExtractionError",
    "InconsistentTicketsError",
    "MissingCaptureGroupError",
    "NoMatchError",
    "TicketCheckError",
    "TicketMissingInBodyError",
    "TrackerTransportError",
    "UnknownTicketError",
]
