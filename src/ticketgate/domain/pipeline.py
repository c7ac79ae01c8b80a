"""Ticket check pipeline: extract, reconcile, verify, rewrite."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import (
    ErrorCode,
    InconsistentTicketsError,
    MissingCaptureGroupError,
    NoMatchError,
    TicketCheckError,
)
from .extraction import extract, render_comment
from .outcome import Outcome
from .reconciliation import Inconsistent, reconcile
from .rewriting import plan_rewrite
from .verification import verify_all

if TYPE_CHECKING:
    from .ports.host import ChangeRequestHost
    from .ports.tracker import TicketLookup
    from .types import ExtractionRule, TicketSet

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class PipelineSettings:
    """Per-run configuration of the check, independent of any host or credential."""

    title_rule: ExtractionRule
    branch_rule: ExtractionRule
    tracker_domain: str
    title_comment: str | None = None
    branch_comment: str | None = None
    body_ticket_prefix: str | None = None


def _extract_source(
    text: str,
    rule: ExtractionRule,
    *,
    label: str,
    code: ErrorCode,
    comment_template: str | None,
) -> TicketSet:
    try:
        tickets = extract(text, rule)
    except NoMatchError as exc:
        remediation = render_comment(comment_template, text) if comment_template else None
        raise NoMatchError(
            f"The PR {label} is missing a JIRA ticket: {exc}",
            code=code,
            remediation=remediation,
        ) from exc
    except MissingCaptureGroupError as exc:
        raise MissingCaptureGroupError(
            f"The ticket key is missing from the {label} regex: {exc}",
            code=code,
        ) from exc
    log.info(f"The PR {label} matches: {tickets}")
    return tickets


async def check_change_request(
    *,
    host: ChangeRequestHost,
    lookup: TicketLookup,
    settings: PipelineSettings,
) -> Outcome:
    """Run one check over the current snapshot of ``host`` and return its outcome.

    Stages run strictly in sequence and the first ``TicketCheckError`` ends the run;
    the body is written at most once, after every check has passed, and only when
    the rewrite changed it.
    """

    title = host.get_event_title()
    branch = host.get_branch_ref()
    body = host.get_event_body()

    try:
        title_tickets = _extract_source(
            title,
            settings.title_rule,
            label="title",
            code=ErrorCode.INVALID_TITLE,
            comment_template=settings.title_comment,
        )
        branch_tickets = _extract_source(
            branch,
            settings.branch_rule,
            label="branch name",
            code=ErrorCode.INVALID_BRANCH_NAME,
            comment_template=settings.branch_comment,
        )

        result = reconcile(title_tickets, branch_tickets)
        if isinstance(result, Inconsistent):
            raise InconsistentTicketsError(
                only_in_title=result.only_in_a,
                only_in_branch=result.only_in_b,
            )
        tickets = result.tickets

        await verify_all(tickets, lookup)

        plan = plan_rewrite(
            body,
            tickets,
            settings.tracker_domain,
            prefix=settings.body_ticket_prefix,
        )
    except TicketCheckError as exc:
        log.info(f"Ticket check failed: {exc.message}")
        return Outcome.failure(exc)

    if plan.changed:
        await host.update_body(plan.body)
    else:
        log.debug("PR body unchanged, no update issued")

    return Outcome.success(
        tickets,
        single_ticket=not settings.title_rule.multi_ticket,
        body_updated=plan.changed,
    )


__all__ = ["PipelineSettings", "check_change_request"]
