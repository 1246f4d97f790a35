"""Scoped control of MSBuild feature flags through environment variables."""

from msbuild_flags.controller import MSBuildFeatureFlags, msbuild_feature_flags
from msbuild_flags.definitions import (
    FEATURE_FLAG_KEYS,
    FEATURE_FLAGS,
    SKIP_WILDCARD_REGULAR_EXPRESSION,
    flag_definition,
)
from msbuild_flags.encodings import FlagDefinition, FlagEncoding
from msbuild_flags.environment import (
    SYSTEM_ENVIRONMENT,
    EnvironmentAccessor,
    MemoryEnvironment,
    SystemEnvironment,
)
from msbuild_flags.profile import FeatureFlagProfile, profile_from_env, profile_from_mapping

__all__ = [
    "FEATURE_FLAGS",
    "FEATURE_FLAG_KEYS",
    "SKIP_WILDCARD_REGULAR_EXPRESSION",
    "SYSTEM_ENVIRONMENT",
    "EnvironmentAccessor",
    "FeatureFlagProfile",
    "FlagDefinition",
    "FlagEncoding",
    "MSBuildFeatureFlags",
    "MemoryEnvironment",
    "SystemEnvironment",
    "flag_definition",
    "msbuild_feature_flags",
    "profile_from_env",
    "profile_from_mapping",
]
