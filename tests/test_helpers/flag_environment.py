"""Assertions over the variables bound by the feature flag controller."""

from __future__ import annotations

from collections.abc import Iterable

from msbuild_flags import FEATURE_FLAG_KEYS, EnvironmentAccessor


def assert_variables_absent(
    environment: EnvironmentAccessor,
    keys: Iterable[str] = FEATURE_FLAG_KEYS,
) -> None:
    """Assert every key in ``keys`` is unset in ``environment``."""
    present = {key: value for key in keys if (value := environment.get(key)) is not None}
    assert present == {}


class RecordingEnvironment:
    """In-memory accessor that records every write in call order."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.writes: list[tuple[str, str | None]] = []

    def get(self, name: str) -> str | None:
        """Return the stored value for ``name``."""
        return self.values.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Record and apply a write."""
        self.writes.append((name, value))
        if value is None:
            self.values.pop(name, None)
        else:
            self.values[name] = value


class FailingEnvironment:
    """Accessor whose writes fail, for error propagation tests."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    @staticmethod
    def get(name: str) -> str | None:
        """Return ``None`` for every name."""
        del name
        return None

    def set(self, name: str, value: str | None) -> None:
        """Raise the configured error."""
        del name, value
        raise self.error
