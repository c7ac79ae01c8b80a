"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def input_env_name(name: str) -> str:
    """Return the environment variable the Actions runner uses for input ``name``."""

    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, *, strip: bool = True) -> str | None:
    """Return an optional action input, treating blank values as absent.

    With ``strip=False`` the raw value is kept, so whitespace-only values such as a
    single-space delimiter survive.
    """

    value = os.getenv(input_env_name(name))
    if not value:
        return None
    if not strip:
        return value
    return value.strip() or None


def require_inputs(names: Sequence[str]) -> dict[str, str]:
    """Return the given action inputs or raise naming every missing one."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = get_input(name)
        if value is None:
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing required inputs: {missing_list}")

    return values
