"""Pattern-based ticket extraction."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import MissingCaptureGroupError, NoMatchError
from .types import TicketSet

if TYPE_CHECKING:
    from .types import ExtractionRule

log = getLogger(__name__)


def extract(text: str, rule: ExtractionRule) -> TicketSet:
    """Return the tickets captured by the first match of ``rule`` in ``text``.

    Only the first match counts. With a delimiter configured the captured text is
    split into several tickets (trimmed, upper-cased, duplicates collapsed in
    first-seen order); without one it is the sole ticket.
    """

    log.info(f'Checking "{rule.pattern}" with "{rule.flags}" flags against "{text}"')
    match = rule.first_match(text)
    if match is None:
        raise NoMatchError(f'"{text}" does not match "{rule.pattern}"')

    captured = match.group(rule.named_group)
    if not captured or not captured.strip():
        raise MissingCaptureGroupError(
            f'"{rule.pattern}" matched "{match.group(0)}" '
            f'but captured nothing in group "{rule.named_group}"'
        )

    pieces = captured.split(rule.delimiter) if rule.delimiter is not None else [captured]
    tickets = TicketSet.of(pieces)
    if not tickets:
        raise NoMatchError(f'"{captured}" holds no ticket between "{rule.delimiter}" delimiters')

    log.debug("Extracted %s from %r", tickets, text)
    return tickets


def render_comment(template: str, text: str) -> str:
    """Fill the ``%text%`` placeholder of a remediation comment template."""

    return template.replace("%text%", text)


__all__ = ["extract", "render_comment"]
