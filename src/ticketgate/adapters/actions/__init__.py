"""Public interface for the GitHub Actions runner adapter."""

from __future__ import annotations

from .commands import ActionsOutcomeSink
from .context import EventSnapshot, branch_name_from_ref, read_event_snapshot
from .host import ActionsChangeRequest, DryRunChangeRequest

__all__ = [
    "ActionsChangeRequest",
    "ActionsOutcomeSink",
    "DryRunChangeRequest",
    "EventSnapshot",
    "branch_name_from_ref",
    "read_event_snapshot",
]
