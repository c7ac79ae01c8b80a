"""Idempotent rewriting of raw ticket mentions into Markdown links."""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import TicketMissingInBodyError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .types import TicketId

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RewritePlan:
    """Substitutions applied to ``original``, in order, yielding ``body``."""

    original: str
    body: str
    substitutions: tuple[tuple[str, str], ...] = ()

    @property
    def changed(self) -> bool:
        return self.body != self.original


def hyperlink(ticket: TicketId, domain: str) -> str:
    return f"[{ticket}](https://{domain}/browse/{ticket})"


def _standalone(token_pattern: str) -> str:
    # Not part of a longer key, a word or a URL path.
    return rf"(?<![\w/-])(?:{token_pattern})(?!\w)"


def _mention_pattern(ticket: TicketId) -> re.Pattern[str]:
    return re.compile(_standalone(re.escape(ticket)))


def _prefix_pattern(
    prefix: str, ticket: TicketId, domain: str, others: Iterable[TicketId]
) -> re.Pattern[str]:
    """Match ``prefix`` followed on the same line by ``ticket``.

    Only separators and the other tickets of the change request (raw or already
    linked) may stand between the prefix and ``ticket``.
    """

    separator = r"[^\w\n]*"
    alternatives = sorted(
        {
            re.escape(form)
            for other in others
            if other != ticket
            for form in (hyperlink(other, domain), other)
        },
        key=len,
        reverse=True,
    )
    lead = f"(?:{separator}{_standalone('|'.join(alternatives))})*" if alternatives else ""
    return re.compile(
        re.escape(prefix) + lead + separator + _standalone(re.escape(ticket))
    )


def rewrite(
    body: str,
    ticket: TicketId,
    domain: str,
    *,
    prefix: str | None = None,
    others: Iterable[TicketId] = (),
) -> str:
    """Replace the first raw mention of ``ticket`` in ``body`` with its link.

    Returns ``body`` unchanged when the link is already present, when there is no
    raw mention, or when ``prefix`` is configured but absent from ``body``. Raises
    ``TicketMissingInBodyError`` when ``prefix`` is present without ``ticket``
    following it on the same line, with only separators and ``others`` in between.
    """

    ticket_ref = hyperlink(ticket, domain)
    if ticket_ref in body:
        log.debug(f"PR body already contains {ticket} url")
        return body

    if prefix:
        if prefix not in body:
            log.debug(f"PR body has no {prefix!r} prefix, leaving it as is")
            return body
        if not _prefix_pattern(prefix, ticket, domain, others).search(body):
            raise TicketMissingInBodyError(ticket, prefix)

    rewritten, count = _mention_pattern(ticket).subn(
        lambda _match: ticket_ref, body, count=1
    )
    if count:
        log.info(f"JIRA ticket {ticket} exists in PR body, replacing with URL")
    else:
        log.debug(f"PR body does not mention {ticket}")
    return rewritten


def plan_rewrite(
    body: str,
    tickets: Iterable[TicketId],
    domain: str,
    *,
    prefix: str | None = None,
) -> RewritePlan:
    """Rewrite every ticket in order, each substitution applied to the previous output."""

    ordered = tuple(tickets)
    current = body
    substitutions: list[tuple[str, str]] = []
    for ticket in ordered:
        rewritten = rewrite(current, ticket, domain, prefix=prefix, others=ordered)
        if rewritten != current:
            substitutions.append((ticket, hyperlink(ticket, domain)))
        current = rewritten
    return RewritePlan(original=body, body=current, substitutions=tuple(substitutions))


__all__ = ["RewritePlan", "hyperlink", "plan_rewrite", "rewrite"]
