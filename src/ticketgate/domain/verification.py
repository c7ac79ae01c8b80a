"""Tracker verification outcomes and the sequential fail-fast gate."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from .errors import TrackerTransportError, UnknownTicketError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports.tracker import TicketLookup
    from .types import TicketId

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Found:
    ticket: TicketId
    status: Literal["found"] = "found"


@dataclass(frozen=True, slots=True)
class NotFound:
    ticket: TicketId
    status: Literal["not-found"] = "not-found"


@dataclass(frozen=True, slots=True)
class TransportError:
    """Unexpected tracker answer; ``detail`` holds the raw response body."""

    ticket: TicketId
    detail: str
    status_code: int | None = None
    status: Literal["transport-error"] = "transport-error"


type VerificationOutcome = Found | NotFound | TransportError


async def verify_all(tickets: Iterable[TicketId], lookup: TicketLookup) -> None:
    """Verify ``tickets`` one at a time, stopping at the first that is not found."""

    for ticket in tickets:
        log.info(f"Verifying that ticket {ticket} exists in JIRA")
        outcome = await lookup(ticket)
        match outcome:
            case Found():
                log.info(f"JIRA ticket {ticket} found")
            case NotFound():
                raise UnknownTicketError(ticket)
            case TransportError(detail=detail, status_code=status_code):
                raise TrackerTransportError(ticket, detail, status_code=status_code)


__all__ = ["Found", "NotFound", "TransportError", "VerificationOutcome", "verify_all"]
