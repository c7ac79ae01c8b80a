"""In-memory stand-ins for the host, tracker and sink ports."""

from __future__ import annotations

from dataclasses import dataclass, field

from ticketgate.domain.verification import Found, NotFound, TransportError, VerificationOutcome


@dataclass
class FakeHost:
    title: str
    branch: str
    body: str = ""
    updated_bodies: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    reads: int = 0
    fail_comments: bool = False

    def get_event_title(self) -> str:
        self.reads += 1
        return self.title

    def get_event_body(self) -> str:
        self.reads += 1
        return self.body

    def get_branch_ref(self) -> str:
        self.reads += 1
        return self.branch

    async def update_body(self, body: str) -> None:
        self.updated_bodies.append(body)

    async def post_comment(self, message: str) -> None:
        if self.fail_comments:
            raise RuntimeError("comment endpoint unavailable")
        self.comments.append(message)


@dataclass
class FakeLookup:
    """Answers ``Found`` unless a ticket is listed as missing or broken."""

    missing: frozenset[str] = frozenset()
    broken: dict[str, str] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def __call__(self, ticket: str) -> VerificationOutcome:
        self.calls.append(ticket)
        if ticket in self.missing:
            return NotFound(ticket=ticket)
        if ticket in self.broken:
            return TransportError(ticket=ticket, detail=self.broken[ticket], status_code=500)
        return Found(ticket=ticket)


@dataclass
class FakeSink:
    outputs: dict[str, str] = field(default_factory=dict)
    failures: list[str] = field(default_factory=list)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
