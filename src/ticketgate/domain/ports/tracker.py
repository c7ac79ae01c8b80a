"""Port for looking tickets up in the issue tracker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ticketgate.domain.types import TicketId
    from ticketgate.domain.verification import VerificationOutcome


@runtime_checkable
class TicketLookup(Protocol):
    """Callable port issuing one read-only lookup for a ticket."""

    async def __call__(self, ticket: TicketId) -> VerificationOutcome: ...


__all__ = ["TicketLookup"]
