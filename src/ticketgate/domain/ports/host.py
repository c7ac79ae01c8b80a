"""Port for the pull request the check runs against."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChangeRequestHost(Protocol):
    """Read access to the triggering event snapshot and the two write operations."""

    def get_event_title(self) -> str: ...

    def get_event_body(self) -> str: ...

    def get_branch_ref(self) -> str: ...

    async def update_body(self, body: str) -> None: ...

    async def post_comment(self, message: str) -> None: ...


__all__ = ["ChangeRequestHost"]
