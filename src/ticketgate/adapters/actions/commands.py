"""Workflow commands: step outputs and the failure annotation."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from ticketgate.domain.ports.reporting import OutcomeSink

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _default_output_path() -> Path | None:
    value = os.getenv("GITHUB_OUTPUT")
    return Path(value) if value else None


def _stdout() -> TextIO:
    return sys.stdout


@dataclass(slots=True)
class ActionsOutcomeSink:
    """Writes outputs to ``$GITHUB_OUTPUT`` and failures as ``::error::`` commands."""

    output_path: Path | None = field(default_factory=_default_output_path)
    stream_factory: Callable[[], TextIO] = field(default=_stdout)
    failed: bool = False
    outputs: dict[str, str] = field(default_factory=dict)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        if self.output_path is None:
            log.warning(f"GITHUB_OUTPUT is not set, dropping output {name}={value}")
            return
        with self.output_path.open("a", encoding="utf-8") as handle:
            if "\n" in value:
                delimiter = f"ghadelimiter_{name}"
                handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                handle.write(f"{name}={value}\n")

    def set_failed(self, message: str) -> None:
        self.failed = True
        stream = self.stream_factory()
        stream.write(f"::error::{_escape_data(message)}\n")
        stream.flush()


if TYPE_CHECKING:
    _sink_check: OutcomeSink = ActionsOutcomeSink()


__all__ = ["ActionsOutcomeSink"]
