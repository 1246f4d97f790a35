"""Typed environment variable readers for feature flag configuration."""

from __future__ import annotations

import logging
from typing import overload

from msbuild_flags.environment import SYSTEM_ENVIRONMENT, EnvironmentAccessor

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def env_text(
    name: str,
    *,
    default: str | None = None,
    environment: EnvironmentAccessor = SYSTEM_ENVIRONMENT,
) -> str | None:
    """Return a stripped environment variable string.

    Parameters
    ----------
    name
        Environment variable name.
    default
        Value returned when the variable is unset or blank.
    environment
        Accessor to read from.

    Returns
    -------
    str | None
        Stripped value, or ``default`` when missing.
    """
    raw = environment.get(name)
    if raw is None:
        return default
    value = raw.strip()
    return value or default


@overload
def env_bool(name: str, *, environment: EnvironmentAccessor = ...) -> bool | None: ...


@overload
def env_bool(name: str, *, default: bool, environment: EnvironmentAccessor = ...) -> bool: ...


def env_bool(
    name: str,
    *,
    default: bool | None = None,
    environment: EnvironmentAccessor = SYSTEM_ENVIRONMENT,
) -> bool | None:
    """Parse an environment variable as a boolean.

    Parameters
    ----------
    name
        Environment variable name.
    default
        Value returned when the variable is unset or blank.
    environment
        Accessor to read from.

    Returns
    -------
    bool | None
        Parsed boolean, or ``default`` when missing.

    Raises
    ------
    ValueError
        Raised when the variable holds text that is not a recognized boolean.
    """
    raw = environment.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if not value:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _LOGGER.warning("Invalid boolean for %s: %r", name, raw)
    msg = f"Invalid boolean for {name}: {raw!r}"
    raise ValueError(msg)


__all__ = ["env_bool", "env_text"]
