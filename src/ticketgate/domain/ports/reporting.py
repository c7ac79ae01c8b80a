"""Port for publishing the result of a run to the invoking host."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutcomeSink(Protocol):
    def set_output(self, name: str, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


__all__ = ["OutcomeSink"]
