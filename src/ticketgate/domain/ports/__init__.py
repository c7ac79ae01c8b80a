"""Domain port definitions for adapters."""

from __future__ import annotations

from .host import ChangeRequestHost
from .reporting import OutcomeSink
from .tracker import TicketLookup

__all__ = ["ChangeRequestHost", "OutcomeSink", "TicketLookup"]
