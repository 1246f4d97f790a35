"""Declarative feature flag profiles and their configuration loaders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Self

import msgspec

from msbuild_flags.definitions import FLAG_DEFINITIONS
from msbuild_flags.encodings import FlagValue
from msbuild_flags.env_utils import env_bool, env_text
from msbuild_flags.environment import SYSTEM_ENVIRONMENT, EnvironmentAccessor

_LOGGER = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "MSBUILD_FLAGS_"


class FeatureFlagProfile(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Desired values for a subset of the MSBuild feature flags.

    Fields left as ``msgspec.UNSET`` are not written when the profile is
    applied. ``msbuild_exe_path=None`` clears the variable.
    """

    cache_file_enumerations: bool | msgspec.UnsetType = msgspec.UNSET
    load_all_files_as_read_only: bool | msgspec.UnsetType = msgspec.UNSET
    msbuild_exe_path: str | None | msgspec.UnsetType = msgspec.UNSET
    skip_eager_wildcard_evaluation: bool | msgspec.UnsetType = msgspec.UNSET
    use_simple_project_root_element_cache_concurrency: bool | msgspec.UnsetType = msgspec.UNSET

    @classmethod
    def evaluation_defaults(cls, msbuild_exe_path: str | None = None) -> Self:
        """Return the profile used before evaluating a solution's projects.

        Parameters
        ----------
        msbuild_exe_path
            Full path to the MSBuild executable, when known.

        Returns
        -------
        FeatureFlagProfile
            Profile enabling every performance flag.
        """
        return cls(
            cache_file_enumerations=True,
            load_all_files_as_read_only=True,
            msbuild_exe_path=msgspec.UNSET if msbuild_exe_path is None else msbuild_exe_path,
            skip_eager_wildcard_evaluation=True,
            use_simple_project_root_element_cache_concurrency=True,
        )

    def set_values(self) -> dict[str, FlagValue]:
        """Return the fields that are set, keyed by flag name.

        Returns
        -------
        dict[str, bool | str | None]
            Set fields in flag declaration order.
        """
        values: dict[str, FlagValue] = {}
        for name in self.__struct_fields__:
            value = getattr(self, name)
            if value is not msgspec.UNSET:
                values[name] = value
        return values


def profile_from_mapping(payload: Mapping[str, object]) -> FeatureFlagProfile:
    """Validate a mapping, such as a parsed TOML table, into a profile.

    Parameters
    ----------
    payload
        Mapping of flag names to values.

    Returns
    -------
    FeatureFlagProfile
        Validated profile.

    Raises
    ------
    ValueError
        Raised when the payload has unknown keys or wrongly typed values.
    """
    try:
        return msgspec.convert(dict(payload), type=FeatureFlagProfile)
    except msgspec.ValidationError as exc:
        msg = f"Feature flag profile validation failed: {exc}"
        raise ValueError(msg) from exc


def profile_from_env(
    prefix: str = DEFAULT_ENV_PREFIX,
    *,
    environment: EnvironmentAccessor = SYSTEM_ENVIRONMENT,
) -> FeatureFlagProfile:
    """Build a profile from prefixed configuration variables.

    Each flag reads ``<prefix><FLAG_NAME>``, for example
    ``MSBUILD_FLAGS_CACHE_FILE_ENUMERATIONS``. Unset or blank variables leave
    the field unset.

    Parameters
    ----------
    prefix
        Variable name prefix.
    environment
        Accessor to read configuration from.

    Returns
    -------
    FeatureFlagProfile
        Profile populated from the environment.

    Raises
    ------
    ValueError
        Raised when a boolean variable holds unrecognized text.
    """
    payload: dict[str, object] = {}
    for definition in FLAG_DEFINITIONS:
        variable = f"{prefix}{definition.name.upper()}"
        if definition.is_boolean:
            try:
                value: object = env_bool(variable, environment=environment)
            except ValueError as exc:
                msg = f"Feature flag profile validation failed: {exc}"
                raise ValueError(msg) from exc
        else:
            value = env_text(variable, environment=environment)
        if value is not None:
            payload[definition.name] = value
    profile = profile_from_mapping(payload)
    _LOGGER.debug("Loaded MSBuild feature flag profile from %s*: %r", prefix, profile)
    return profile


__all__ = [
    "DEFAULT_ENV_PREFIX",
    "FeatureFlagProfile",
    "profile_from_env",
    "profile_from_mapping",
]
