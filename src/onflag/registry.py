"""Flag registry: the single entry point for feature flag queries.

A FlagRegistry is created once at application startup, bound to exactly
one FlagSource, and passed to any code that needs to check flags. It has
two states, uninitialized and initialized; once bound, the source
cannot be replaced.

Example:
    registry = FlagRegistry(MapSource({"daily_emails": "on"}))
    registry.ensure_exist(["daily_emails"]).raise_for_missing()
    if registry.enabled("daily_emails"):
        send_daily_emails()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

from onflag.exceptions import (
    FlagMissingError,
    NotInitializedError,
    RegistryAlreadyInitializedError,
)
from onflag.sources.env import EnvironmentSource
from onflag.sources.interface import ON, FlagSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FlagCheck:
    """Result of checking that a set of flags is defined.

    Attributes:
        checked: Names that were checked, in order.
        missing: Names not defined in the source, in order, without duplicates.
    """

    checked: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def ok(self) -> bool:
        """True if every checked flag is defined."""
        return not self.missing

    @property
    def error(self) -> FlagMissingError | None:
        """FlagMissingError naming the missing flags, or None if all exist."""
        if self.ok:
            return None
        return FlagMissingError(self.missing)

    def raise_for_missing(self) -> None:
        """Raise FlagMissingError if any checked flag is undefined.

        Raises:
            FlagMissingError: If one or more flags are missing.
        """
        error = self.error
        if error is not None:
            raise error

    def __bool__(self) -> bool:
        return self.ok


class FlagRegistry:
    """Resolves feature flags against a single bound source.

    Thread-safe: initialization is guarded by a lock; after that the
    source is only read, so concurrent queries need no locking.
    """

    def __init__(self, source: FlagSource | None = None) -> None:
        """Create a registry.

        Args:
            source: Source to bind immediately. If None, the registry starts
                uninitialized and initialize() must be called before queries.
        """
        self._source: FlagSource | None = None
        self._lock = threading.Lock()
        if source is not None:
            self.initialize(source)

    def initialize(self, source: FlagSource | None = None) -> FlagRegistry:
        """Bind the registry to a source.

        Args:
            source: Source to bind. Defaults to an EnvironmentSource with
                no prefix.

        Returns:
            The registry, for chaining.

        Raises:
            RegistryAlreadyInitializedError: If a source is already bound.
        """
        with self._lock:
            if self._source is not None:
                raise RegistryAlreadyInitializedError()
            self._source = source if source is not None else EnvironmentSource()
        logger.debug("Flag registry initialized with %r", self._source)
        return self

    @property
    def initialized(self) -> bool:
        """True once a source has been bound."""
        return self._source is not None

    @property
    def source(self) -> FlagSource:
        """The bound source.

        Raises:
            NotInitializedError: If the registry is not initialized.
        """
        return self._require_source("source")

    def _require_source(self, operation: str) -> FlagSource:
        source = self._source
        if source is None:
            raise NotInitializedError(operation)
        return source

    def enabled(self, name: str) -> bool:
        """Check whether a flag is on.

        A flag is on only when the source defines it and its raw value is
        exactly "on". Undefined flags and any other value are off.

        Args:
            name: Flag name (case-sensitive).

        Returns:
            True if the flag is enabled.

        Raises:
            NotInitializedError: If the registry is not initialized.
        """
        source = self._require_source("enabled")
        return source.exists(name) and source.raw_value(name) == ON

    def ensure_exist(self, names: Iterable[str]) -> FlagCheck:
        """Check that every named flag is defined in the source.

        All names are checked; the result lists every missing one. Call
        raise_for_missing() on the result to fail fast at startup.

        Args:
            names: Flag names to check, in order.

        Returns:
            FlagCheck describing which flags are missing.

        Raises:
            NotInitializedError: If the registry is not initialized.
        """
        source = self._require_source("ensure_exist")
        checked = tuple(names)
        missing: list[str] = []
        for name in checked:
            if not source.exists(name) and name not in missing:
                missing.append(name)

        if missing:
            logger.warning("Missing feature flags: %s", ", ".join(missing))
        return FlagCheck(checked=checked, missing=tuple(missing))

    def when_enabled(self, name: str, action: Callable[[], T]) -> T | None:
        """Run an action only if a flag is on.

        Args:
            name: Flag name.
            action: Zero-argument callable, run synchronously.

        Returns:
            The action's return value, or None if the flag is off.

        Raises:
            NotInitializedError: If the registry is not initialized.
        """
        if self.enabled(name):
            return action()
        return None

    def enabled_flags(self, names: Iterable[str]) -> list[str]:
        """Return the names that are enabled, preserving input order."""
        return [name for name in names if self.enabled(name)]

    def log_enabled_flags(self, names: Iterable[str]) -> None:
        """Log the enabled flags among names at INFO level.

        Useful at startup to make active flags visible in logs.
        If none are enabled, logs nothing.
        """
        enabled = self.enabled_flags(names)
        if enabled:
            logger.info("Enabled feature flags: %s", ", ".join(enabled))

    def __repr__(self) -> str:
        if self._source is None:
            return "FlagRegistry(uninitialized)"
        return f"FlagRegistry({self._source!r})"
