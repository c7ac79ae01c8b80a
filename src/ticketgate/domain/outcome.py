"""Run outcome and its publication to the host."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .types import TicketSet

if TYPE_CHECKING:
    from .errors import ErrorCode, TicketCheckError
    from .ports.host import ChangeRequestHost
    from .ports.reporting import OutcomeSink

log = getLogger(__name__)

ERROR_CODE_OUTPUT = "error-code"
TICKET_OUTPUT = "ticket"
TICKETS_OUTPUT = "tickets"


class OutcomeStatus(StrEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class Outcome:
    """Terminal state of one run, built once and consumed by ``report_outcome``."""

    status: OutcomeStatus
    code: ErrorCode | None = None
    message: str | None = None
    comment: str | None = None
    tickets: TicketSet = TicketSet()
    single_ticket: bool = False
    body_updated: bool = False

    @classmethod
    def success(
        cls, tickets: TicketSet, *, single_ticket: bool, body_updated: bool
    ) -> Outcome:
        return cls(
            status=OutcomeStatus.SUCCEEDED,
            tickets=tickets,
            single_ticket=single_ticket,
            body_updated=body_updated,
        )

    @classmethod
    def failure(cls, error: TicketCheckError) -> Outcome:
        return cls(
            status=OutcomeStatus.FAILED,
            code=error.code,
            message=error.message,
            comment=error.remediation,
        )

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCEEDED


async def report_outcome(outcome: Outcome, *, host: ChangeRequestHost, sink: OutcomeSink) -> None:
    """Publish ``outcome``: outputs, the remediation comment and the failure signal."""

    if outcome.succeeded:
        if outcome.single_ticket and outcome.tickets:
            sink.set_output(TICKET_OUTPUT, outcome.tickets.items[0])
        sink.set_output(TICKETS_OUTPUT, ",".join(outcome.tickets))
        log.info("done!")
        return

    if outcome.comment:
        try:
            await host.post_comment(outcome.comment)
        except Exception:  # noqa: BLE001
            log.exception("Could not post the remediation comment")
    if outcome.code is not None:
        sink.set_output(ERROR_CODE_OUTPUT, outcome.code)
    sink.set_failed(outcome.message or "Ticket check failed")


__all__ = [
    "ERROR_CODE_OUTPUT",
    "TICKETS_OUTPUT",
    "TICKET_OUTPUT",
    "Outcome",
    "OutcomeStatus",
    "report_outcome",
]
