"""Tests for the MSBuild feature flag definitions."""

from __future__ import annotations

import re

import pytest

from msbuild_flags import (
    FEATURE_FLAG_KEYS,
    FEATURE_FLAGS,
    SKIP_WILDCARD_REGULAR_EXPRESSION,
    FlagEncoding,
    MSBuildFeatureFlags,
    flag_definition,
)


def test_bound_variable_names() -> None:
    """Definitions should bind the exact MSBuild variable names in order."""
    assert FEATURE_FLAG_KEYS == (
        "MSBUILDCACHEFILEENUMERATIONS",
        "MSBUILDLOADALLFILESASREADONLY",
        "MSBUILD_EXE_PATH",
        "MSBUILDSKIPEAGERWILDCARDEVALUATIONREGEXES",
        "MSBUILDUSESIMPLEPROJECTROOTELEMENTCACHECONCURRENCY",
    )


def test_keys_are_unique() -> None:
    """No two flags should share a variable."""
    assert len(set(FEATURE_FLAG_KEYS)) == len(FEATURE_FLAG_KEYS)


def test_encodings_per_flag() -> None:
    """Each flag should carry its documented encoding."""
    encodings = {name: definition.encoding for name, definition in FEATURE_FLAGS.items()}
    assert encodings == {
        "cache_file_enumerations": FlagEncoding.PLAIN_BOOLEAN,
        "load_all_files_as_read_only": FlagEncoding.PLAIN_BOOLEAN,
        "msbuild_exe_path": FlagEncoding.RAW_STRING,
        "skip_eager_wildcard_evaluation": FlagEncoding.PRESENCE_BOOLEAN,
        "use_simple_project_root_element_cache_concurrency": FlagEncoding.INVERTED_BOOLEAN,
    }


def test_skip_wildcard_expression_literal() -> None:
    """The skip-wildcard value should match wildcard specs not ending in proj."""
    assert SKIP_WILDCARD_REGULAR_EXPRESSION == "[*?]+.*(?<!proj)$"
    pattern = re.compile(SKIP_WILDCARD_REGULAR_EXPRESSION)
    assert pattern.search("src/**/*.cs")
    assert pattern.search("file?.txt")
    assert not pattern.search("src/**/*.csproj")
    assert not pattern.search("src/Program.cs")
    assert flag_definition("skip_eager_wildcard_evaluation").enabled_value == (
        SKIP_WILDCARD_REGULAR_EXPRESSION
    )


def test_every_definition_has_controller_property() -> None:
    """The controller should expose one property per definition."""
    assert MSBuildFeatureFlags.definitions == tuple(FEATURE_FLAGS.values())
    for name in FEATURE_FLAGS:
        assert isinstance(getattr(MSBuildFeatureFlags, name), property)


def test_flag_definition_unknown_name() -> None:
    """Unknown flag names should raise KeyError listing known flags."""
    with pytest.raises(KeyError, match="cache_file_enumerations"):
        flag_definition("missing_flag")


def test_feature_flags_mapping_is_read_only() -> None:
    """The registry mapping should reject mutation."""
    with pytest.raises(TypeError):
        FEATURE_FLAGS["extra"] = FEATURE_FLAGS["msbuild_exe_path"]  # type: ignore[index]
