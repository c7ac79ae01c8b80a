from __future__ import annotations

import asyncio

from tests.support.fakes import FakeHost, FakeSink
from ticketgate.domain.errors import ErrorCode, NoMatchError, UnknownTicketError
from ticketgate.domain.outcome import Outcome, report_outcome
from ticketgate.domain.types import TicketSet


def test_success_publishes_ticket_outputs() -> None:
    host = FakeHost(title="", branch="")
    sink = FakeSink()
    outcome = Outcome.success(TicketSet.of(["ABC-1"]), single_ticket=True, body_updated=False)

    asyncio.run(report_outcome(outcome, host=host, sink=sink))

    assert sink.outputs == {"ticket": "ABC-1", "tickets": "ABC-1"}
    assert sink.failures == []


def test_multi_ticket_success_has_no_single_ticket_output() -> None:
    sink = FakeSink()
    outcome = Outcome.success(
        TicketSet.of(["ABC-1", "ABC-2"]), single_ticket=False, body_updated=True
    )

    asyncio.run(report_outcome(outcome, host=FakeHost(title="", branch=""), sink=sink))

    assert sink.outputs == {"tickets": "ABC-1,ABC-2"}


def test_commentable_failure_posts_comment_and_fails() -> None:
    host = FakeHost(title="", branch="")
    sink = FakeSink()
    error = NoMatchError("no ticket", code=ErrorCode.INVALID_TITLE, remediation="Add a ticket")

    asyncio.run(report_outcome(Outcome.failure(error), host=host, sink=sink))

    assert host.comments == ["Add a ticket"]
    assert sink.outputs == {"error-code": "invalid-title"}
    assert sink.failures == ["no ticket"]


def test_silent_failure_posts_nothing() -> None:
    host = FakeHost(title="", branch="")
    sink = FakeSink()

    asyncio.run(report_outcome(Outcome.failure(UnknownTicketError("ABC-1")), host=host, sink=sink))

    assert host.comments == []
    assert sink.outputs == {"error-code": "unknown-jira-ticket"}
    assert sink.failures == ["Unknown JIRA ticket: ABC-1"]


def test_comment_failure_does_not_mask_the_run_failure() -> None:
    host = FakeHost(title="", branch="", fail_comments=True)
    sink = FakeSink()
    error = NoMatchError("no ticket", code=ErrorCode.INVALID_BRANCH_NAME, remediation="Rename")

    asyncio.run(report_outcome(Outcome.failure(error), host=host, sink=sink))

    assert sink.failures == ["no ticket"]
    assert sink.outputs == {"error-code": "invalid-branch-name"}
