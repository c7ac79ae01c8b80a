"""Shared logging helpers for ticketgate."""

from __future__ import annotations

import logging
import os


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to INFO, or DEBUG when the Actions runner has debug logging enabled
    (``RUNNER_DEBUG=1``). Pass ``force=True`` to reconfigure during tests.
    """

    if level is None:
        level = logging.DEBUG if os.getenv("RUNNER_DEBUG") == "1" else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
