"""Definitions of the MSBuild feature flags and the variables they bind.

The variable names and values are read by MSBuild itself:

- ``MSBUILDCACHEFILEENUMERATIONS`` caches wildcard expansions for the whole
  process (``src/Shared/Traits.cs``).
- ``MSBUILDLOADALLFILESASREADONLY`` loads every project as read-only, which
  enables an optimized reader (``XmlDocumentWithLocation.cs``).
- ``MSBUILD_EXE_PATH`` locates the toolset. MSBuild is not installed globally
  since 15.0, so evaluating processes must set it for properties such as
  ``$(MSBuildExtensionsPath)`` to resolve (``BuildEnvironmentHelper.cs``).
- ``MSBUILDSKIPEAGERWILDCARDEVALUATIONREGEXES`` lists file specs whose
  wildcards are not expanded (``EngineFileUtilities.cs``).
- ``MSBUILDUSESIMPLEPROJECTROOTELEMENTCACHECONCURRENCY`` selects the simple
  project root element cache locking strategy (``src/Shared/Traits.cs``).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from msbuild_flags.encodings import FlagDefinition, FlagEncoding

# Matches any file spec containing a * or ? wildcard that does not end in "proj".
SKIP_WILDCARD_REGULAR_EXPRESSION: Final = r"[*?]+.*(?<!proj)$"

CACHE_FILE_ENUMERATIONS: Final = FlagDefinition(
    name="cache_file_enumerations",
    key="MSBUILDCACHEFILEENUMERATIONS",
    encoding=FlagEncoding.PLAIN_BOOLEAN,
)
LOAD_ALL_FILES_AS_READ_ONLY: Final = FlagDefinition(
    name="load_all_files_as_read_only",
    key="MSBUILDLOADALLFILESASREADONLY",
    encoding=FlagEncoding.PLAIN_BOOLEAN,
)
MSBUILD_EXE_PATH: Final = FlagDefinition(
    name="msbuild_exe_path",
    key="MSBUILD_EXE_PATH",
    encoding=FlagEncoding.RAW_STRING,
)
SKIP_EAGER_WILDCARD_EVALUATION: Final = FlagDefinition(
    name="skip_eager_wildcard_evaluation",
    key="MSBUILDSKIPEAGERWILDCARDEVALUATIONREGEXES",
    encoding=FlagEncoding.PRESENCE_BOOLEAN,
    enabled_value=SKIP_WILDCARD_REGULAR_EXPRESSION,
)
USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY: Final = FlagDefinition(
    name="use_simple_project_root_element_cache_concurrency",
    key="MSBUILDUSESIMPLEPROJECTROOTELEMENTCACHECONCURRENCY",
    encoding=FlagEncoding.INVERTED_BOOLEAN,
)

FLAG_DEFINITIONS: Final[tuple[FlagDefinition, ...]] = (
    CACHE_FILE_ENUMERATIONS,
    LOAD_ALL_FILES_AS_READ_ONLY,
    MSBUILD_EXE_PATH,
    SKIP_EAGER_WILDCARD_EVALUATION,
    USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY,
)

FEATURE_FLAGS: Final[Mapping[str, FlagDefinition]] = MappingProxyType(
    {definition.name: definition for definition in FLAG_DEFINITIONS}
)
FEATURE_FLAG_KEYS: Final[tuple[str, ...]] = tuple(definition.key for definition in FLAG_DEFINITIONS)


def flag_definition(name: str) -> FlagDefinition:
    """Return the flag definition registered under ``name``.

    Parameters
    ----------
    name
        Flag attribute name, for example ``"cache_file_enumerations"``.

    Returns
    -------
    FlagDefinition
        Matching flag definition.

    Raises
    ------
    KeyError
        Raised when no flag is registered under ``name``.
    """
    definition = FEATURE_FLAGS.get(name)
    if definition is None:
        known = ", ".join(sorted(FEATURE_FLAGS))
        msg = f"Unknown MSBuild feature flag {name!r}. Known flags: {known}."
        raise KeyError(msg)
    return definition


__all__ = [
    "CACHE_FILE_ENUMERATIONS",
    "FEATURE_FLAGS",
    "FEATURE_FLAG_KEYS",
    "FLAG_DEFINITIONS",
    "LOAD_ALL_FILES_AS_READ_ONLY",
    "MSBUILD_EXE_PATH",
    "SKIP_EAGER_WILDCARD_EVALUATION",
    "SKIP_WILDCARD_REGULAR_EXPRESSION",
    "USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY",
    "flag_definition",
]
