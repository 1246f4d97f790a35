"""Scoped controller for MSBuild feature flag environment variables."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, ClassVar, Self

from msbuild_flags.definitions import (
    CACHE_FILE_ENUMERATIONS,
    FEATURE_FLAGS,
    FLAG_DEFINITIONS,
    LOAD_ALL_FILES_AS_READ_ONLY,
    MSBUILD_EXE_PATH,
    SKIP_EAGER_WILDCARD_EVALUATION,
    USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY,
)
from msbuild_flags.environment import SYSTEM_ENVIRONMENT, EnvironmentAccessor
from msbuild_flags.profile import FeatureFlagProfile

if TYPE_CHECKING:
    from types import TracebackType

    from msbuild_flags.encodings import FlagDefinition, FlagValue

_LOGGER = logging.getLogger(__name__)


class MSBuildFeatureFlags:
    """Read and write MSBuild feature flags for the lifetime of a scope.

    Constructing the controller touches no variables. Closing it, directly or
    by leaving a ``with`` block, clears every bound variable whether or not it
    was set through this controller. Values that existed before construction
    are not restored.

    Parameters
    ----------
    environment
        Accessor used to read and write variables. Defaults to the process
        environment. The controller does not own the accessor.
    """

    definitions: ClassVar[tuple[FlagDefinition, ...]] = FLAG_DEFINITIONS

    def __init__(self, environment: EnvironmentAccessor = SYSTEM_ENVIRONMENT) -> None:
        self._environment = environment

    @property
    def environment(self) -> EnvironmentAccessor:
        """Return the accessor bound to this controller."""
        return self._environment

    def _read(self, definition: FlagDefinition) -> FlagValue:
        return definition.decode(self._environment.get(definition.key))

    def _write(self, definition: FlagDefinition, value: FlagValue) -> None:
        encoded = definition.encode(value)
        _LOGGER.debug(
            "Set MSBuild feature flag %s (%s) to %r",
            definition.name,
            definition.key,
            encoded,
        )
        self._environment.set(definition.key, encoded)

    @property
    def cache_file_enumerations(self) -> bool:
        """Whether wildcard expansions are cached for the entire process."""
        return bool(self._read(CACHE_FILE_ENUMERATIONS))

    @cache_file_enumerations.setter
    def cache_file_enumerations(self, value: bool) -> None:
        self._write(CACHE_FILE_ENUMERATIONS, value)

    @property
    def load_all_files_as_read_only(self) -> bool:
        """Whether all projects are loaded read-only with the optimized reader."""
        return bool(self._read(LOAD_ALL_FILES_AS_READ_ONLY))

    @load_all_files_as_read_only.setter
    def load_all_files_as_read_only(self, value: bool) -> None:
        self._write(LOAD_ALL_FILES_AS_READ_ONLY, value)

    @property
    def msbuild_exe_path(self) -> str | None:
        """Full path to the MSBuild executable used to evaluate projects.

        Evaluating processes must set this for MSBuild to find its toolsets.
        Assigning ``None`` clears the variable.
        """
        value = self._read(MSBUILD_EXE_PATH)
        return value if isinstance(value, str) else None

    @msbuild_exe_path.setter
    def msbuild_exe_path(self, value: str | None) -> None:
        self._write(MSBUILD_EXE_PATH, value)

    @property
    def skip_eager_wildcard_evaluation(self) -> bool:
        """Whether MSBuild skips expanding wildcards that do not end in ``proj``.

        Any value present in the variable reads as enabled.
        """
        return bool(self._read(SKIP_EAGER_WILDCARD_EVALUATION))

    @skip_eager_wildcard_evaluation.setter
    def skip_eager_wildcard_evaluation(self, value: bool) -> None:
        self._write(SKIP_EAGER_WILDCARD_EVALUATION, value)

    @property
    def use_simple_project_root_element_cache_concurrency(self) -> bool:
        """Whether MSBuild uses simple project root element cache concurrency.

        An unset variable reads as enabled; only ``"1"`` reads as disabled.
        """
        return bool(self._read(USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY))

    @use_simple_project_root_element_cache_concurrency.setter
    def use_simple_project_root_element_cache_concurrency(self, value: bool) -> None:
        self._write(USE_SIMPLE_PROJECT_ROOT_ELEMENT_CACHE_CONCURRENCY, value)

    def snapshot(self) -> FeatureFlagProfile:
        """Return the decoded value of every flag.

        Returns
        -------
        FeatureFlagProfile
            Profile with every field populated from the environment.
        """
        return FeatureFlagProfile(
            cache_file_enumerations=self.cache_file_enumerations,
            load_all_files_as_read_only=self.load_all_files_as_read_only,
            msbuild_exe_path=self.msbuild_exe_path,
            skip_eager_wildcard_evaluation=self.skip_eager_wildcard_evaluation,
            use_simple_project_root_element_cache_concurrency=(
                self.use_simple_project_root_element_cache_concurrency
            ),
        )

    def apply(self, profile: FeatureFlagProfile) -> None:
        """Write every set field of ``profile``; unset fields are left alone."""
        for name, value in profile.set_values().items():
            setattr(self, name, value)

    def close(self) -> None:
        """Clear every bound variable.

        Safe to call more than once. Errors raised by the accessor propagate.
        """
        for definition in self.definitions:
            self._environment.set(definition.key, None)
        _LOGGER.debug(
            "Cleared MSBuild feature flag variables: %s",
            ", ".join(definition.key for definition in self.definitions),
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@contextmanager
def msbuild_feature_flags(
    profile: FeatureFlagProfile | None = None,
    *,
    environment: EnvironmentAccessor = SYSTEM_ENVIRONMENT,
    **overrides: bool | str | None,
) -> Iterator[MSBuildFeatureFlags]:
    """Yield a controller with ``profile`` and ``overrides`` applied.

    Parameters
    ----------
    profile
        Optional profile applied first.
    environment
        Accessor used by the controller.
    **overrides
        Flag values applied after the profile, keyed by flag name.

    Yields
    ------
    MSBuildFeatureFlags
        Active controller. Every bound variable is cleared on exit.

    Raises
    ------
    AttributeError
        Raised when an override names an unknown flag.
    """
    flags = MSBuildFeatureFlags(environment)
    try:
        if profile is not None:
            flags.apply(profile)
        for name, value in overrides.items():
            if name not in FEATURE_FLAGS:
                msg = f"Unknown MSBuild feature flag {name!r}."
                raise AttributeError(msg)
            setattr(flags, name, value)
        yield flags
    finally:
        flags.close()


__all__ = ["MSBuildFeatureFlags", "msbuild_feature_flags"]
