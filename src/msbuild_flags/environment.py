"""Environment variable accessors used by the feature flag controller.

All reads and writes of MSBuild feature flag variables go through an
``EnvironmentAccessor``. Production code uses the process-wide
``SYSTEM_ENVIRONMENT``; tests and dry runs inject a ``MemoryEnvironment``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentAccessor(Protocol):
    """Protocol for reading and writing named environment variables."""

    def get(self, name: str) -> str | None:
        """Return the value bound to ``name``, or ``None`` when unset."""
        ...

    def set(self, name: str, value: str | None) -> None:
        """Bind ``name`` to ``value``, or remove the binding when ``value`` is ``None``."""
        ...


class SystemEnvironment:
    """Accessor backed by the real process environment."""

    @staticmethod
    def get(name: str) -> str | None:
        """Return the process environment value for ``name``.

        Parameters
        ----------
        name
            Environment variable name.

        Returns
        -------
        str | None
            Current value, or ``None`` when the variable is unset.
        """
        return os.environ.get(name)

    @staticmethod
    def set(name: str, value: str | None) -> None:
        """Set or remove a process environment variable.

        Parameters
        ----------
        name
            Environment variable name.
        value
            Value to bind, or ``None`` to remove the variable.
        """
        if value is None:
            os.environ.pop(name, None)
            return
        os.environ[name] = value


SYSTEM_ENVIRONMENT = SystemEnvironment()


class MemoryEnvironment:
    """In-memory accessor that never touches the process environment."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial) if initial else {}

    def get(self, name: str) -> str | None:
        """Return the stored value for ``name``, or ``None`` when unset.

        Returns
        -------
        str | None
            Stored value or ``None``.
        """
        return self._values.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Store or remove ``name``."""
        if value is None:
            self._values.pop(name, None)
            return
        self._values[name] = value

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the stored bindings.

        Returns
        -------
        dict[str, str]
            Current name/value bindings.
        """
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)


__all__ = [
    "SYSTEM_ENVIRONMENT",
    "EnvironmentAccessor",
    "MemoryEnvironment",
    "SystemEnvironment",
]
