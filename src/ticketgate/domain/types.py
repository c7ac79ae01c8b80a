"""Value types shared by the ticket check stages."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ticketgate.config.errors import ConfigurationError

type TicketId = str

DEFAULT_NAMED_GROUP = "ticket"
DEFAULT_FLAGS = "g"

# JavaScript-style flags understood in rule configuration. ``g``, ``u`` and ``d`` have
# no effect here: only the first match is used and Python patterns are unicode-aware.
_FLAG_MAP: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
_IGNORED_FLAGS = frozenset("gud")
_STICKY_FLAG = "y"

# ``(?<name>...)`` groups, as written for JavaScript; lookbehinds are left alone. The
# paren must follow an even run of backslashes, otherwise it is a literal.
_JS_NAMED_GROUP = re.compile(r"(?<!\\)((?:\\\\)*)\(\?<(?=[A-Za-z_])")


def _to_python_syntax(pattern: str) -> str:
    return _JS_NAMED_GROUP.sub(r"\1(?P<", pattern)


def normalize_ticket(value: str) -> TicketId:
    return value.strip().upper()


@dataclass(frozen=True, slots=True, eq=False)
class TicketSet:
    """Unique tickets in first-seen order; equality ignores order."""

    items: tuple[TicketId, ...] = ()

    @classmethod
    def of(cls, tickets: Iterable[str]) -> TicketSet:
        seen: dict[TicketId, None] = {}
        for ticket in tickets:
            normalized = normalize_ticket(ticket)
            if normalized:
                seen.setdefault(normalized, None)
        return cls(tuple(seen))

    def __iter__(self) -> Iterator[TicketId]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, ticket: object) -> bool:
        return ticket in self.items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicketSet):
            return NotImplemented
        return frozenset(self.items) == frozenset(other.items)

    def __hash__(self) -> int:
        return hash(frozenset(self.items))

    def __str__(self) -> str:
        return ", ".join(self.items)

    def difference(self, other: TicketSet) -> TicketSet:
        return TicketSet(tuple(ticket for ticket in self.items if ticket not in other))


@dataclass(frozen=True, slots=True)
class ExtractionRule:
    """Caller-supplied pattern with a mandatory named capture group.

    The pattern is compiled once on construction. Configuration defects (invalid
    pattern, unknown flag, missing group) raise ``ConfigurationError`` here rather
    than surfacing later as "no ticket found".
    """

    pattern: str
    flags: str = DEFAULT_FLAGS
    named_group: str = DEFAULT_NAMED_GROUP
    delimiter: str | None = None
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)
    sticky: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.delimiter == "":
            object.__setattr__(self, "delimiter", None)

        re_flags = re.RegexFlag(0)
        sticky = False
        for flag in self.flags:
            if flag in _FLAG_MAP:
                re_flags |= _FLAG_MAP[flag]
            elif flag == _STICKY_FLAG:
                sticky = True
            elif flag not in _IGNORED_FLAGS:
                raise ConfigurationError(f"Unsupported regex flag {flag!r} in {self.flags!r}")

        try:
            compiled = re.compile(_to_python_syntax(self.pattern), re_flags)
        except re.error as exc:
            raise ConfigurationError(f"Invalid regex {self.pattern!r}: {exc}") from exc

        if self.named_group not in compiled.groupindex:
            raise ConfigurationError(
                f"Regex {self.pattern!r} has no named group {self.named_group!r}"
            )

        object.__setattr__(self, "compiled", compiled)
        object.__setattr__(self, "sticky", sticky)

    @property
    def multi_ticket(self) -> bool:
        return self.delimiter is not None

    def first_match(self, text: str) -> re.Match[str] | None:
        if self.sticky:
            return self.compiled.match(text)
        return self.compiled.search(text)


__all__ = ["ExtractionRule", "TicketId", "TicketSet", "normalize_ticket"]
