"""Custom exceptions for feature flag resolution.

All library errors inherit from FlagError, allowing callers to catch
every flag-related failure with a single except clause if desired.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class FlagError(Exception):
    """Base exception for feature flag errors."""


class NotInitializedError(FlagError):
    """Raised when a registry is queried before a source is bound.

    Attributes:
        operation: The operation that was attempted (e.g., "enabled").
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot call {operation}(): flag registry has not been initialized"
        )


class RegistryAlreadyInitializedError(FlagError):
    """Raised when initialize() is called on an initialized registry."""

    def __init__(self) -> None:
        super().__init__("Flag registry is already initialized")


class SourceLoadError(FlagError):
    """Raised when a file-backed source cannot be read or parsed.

    Attributes:
        path: Path of the flag file that failed to load.
        reason: Human-readable description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load flag file {path}: {reason}")


class FlagMissingError(FlagError):
    """Raised when required flags are not defined in the active source.

    Attributes:
        missing: Names of the undefined flags, in the order they were checked.
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing feature flags: {', '.join(self.missing)}")


class ConfigurationError(FlagError):
    """Raised when ONFLAG_* settings are invalid."""
