"""Shared pytest fixtures for MSBuild feature flag tests."""

from __future__ import annotations

import pytest

from msbuild_flags import FEATURE_FLAG_KEYS, MemoryEnvironment, MSBuildFeatureFlags


@pytest.fixture
def memory_environment() -> MemoryEnvironment:
    """Return an empty in-memory environment accessor."""
    return MemoryEnvironment()


@pytest.fixture
def flags(memory_environment: MemoryEnvironment) -> MSBuildFeatureFlags:
    """Return a controller bound to the in-memory environment."""
    return MSBuildFeatureFlags(memory_environment)


@pytest.fixture
def clean_process_environment(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the bound variables from ``os.environ`` and restore them afterwards."""
    for key in FEATURE_FLAG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
