"""Consistency check between the tickets of two text sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .types import TicketSet


@dataclass(frozen=True, slots=True)
class Consistent:
    tickets: TicketSet
    status: Literal["consistent"] = "consistent"


@dataclass(frozen=True, slots=True)
class Inconsistent:
    """Both one-sided differences, so a failure can name every extra ticket."""

    only_in_a: TicketSet
    only_in_b: TicketSet
    status: Literal["inconsistent"] = "inconsistent"


type ReconciliationResult = Consistent | Inconsistent


def reconcile(a: TicketSet, b: TicketSet) -> ReconciliationResult:
    """Compare two ticket sets for set equality (order and multiplicity ignored)."""

    only_in_a = a.difference(b)
    only_in_b = b.difference(a)
    if only_in_a or only_in_b:
        return Inconsistent(only_in_a=only_in_a, only_in_b=only_in_b)
    return Consistent(tickets=a)


__all__ = ["Consistent", "Inconsistent", "ReconciliationResult", "reconcile"]
