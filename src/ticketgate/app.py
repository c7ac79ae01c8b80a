"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ticketgate.adapters.actions import (
    ActionsChangeRequest,
    DryRunChangeRequest,
    read_event_snapshot,
)
from ticketgate.adapters.github import GitHubClient
from ticketgate.adapters.http_resilience import ResilientClient
from ticketgate.adapters.jira import JiraClient
from ticketgate.config import get_github_config, get_jira_config
from ticketgate.config.check import get_pipeline_settings
from ticketgate.domain.outcome import report_outcome
from ticketgate.domain.pipeline import check_change_request

if TYPE_CHECKING:
    from pathlib import Path

    from ticketgate.adapters.http_resilience import ClientFactory
    from ticketgate.domain.outcome import Outcome
    from ticketgate.domain.ports import ChangeRequestHost, OutcomeSink, TicketLookup


log = getLogger(__name__)


async def run_check(
    *,
    sink: OutcomeSink,
    event_path: Path | None = None,
    dry_run: bool = False,
    lookup: TicketLookup | None = None,
    client_factory: ClientFactory | None = None,
) -> Outcome | None:
    """Check the triggering pull request and report the result to ``sink``.

    Nothing propagates past this function: configuration problems and unexpected
    faults are logged and reported as a failed run, and ``None`` is returned.
    """

    factory = client_factory or ResilientClient
    try:
        settings = get_pipeline_settings()
        effective_lookup = lookup or JiraClient(config=get_jira_config(), client_factory=factory)
        snapshot = read_event_snapshot(event_path)

        host: ChangeRequestHost
        if dry_run:
            host = DryRunChangeRequest(snapshot=snapshot)
        else:
            host = ActionsChangeRequest(
                snapshot=snapshot,
                client=GitHubClient(
                    repository=snapshot.repository,
                    number=snapshot.number,
                    config=get_github_config(),
                    client_factory=factory,
                ),
            )
        log.info(
            "Starting ticket check: repository=%s, pull_request=%s, dry_run=%s",
            snapshot.repository,
            snapshot.number,
            dry_run,
        )

        outcome = await check_change_request(host=host, lookup=effective_lookup, settings=settings)
        await report_outcome(outcome, host=host, sink=sink)
    except Exception as exc:  # noqa: BLE001
        log.exception("Ticket check aborted")
        sink.set_failed(str(exc) or type(exc).__name__)
        return None

    log.info(
        f"Finished ticket check: status={outcome.status}, code={outcome.code}, "
        f"tickets={outcome.tickets}, body_updated={outcome.body_updated}"
    )
    return outcome
