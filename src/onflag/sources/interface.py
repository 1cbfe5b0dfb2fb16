"""FlagSource interface for feature flag backends."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

ON = "on"
OFF = "off"


@runtime_checkable
class FlagSource(Protocol):
    """Protocol for flag source implementations.

    A source answers two questions about a flag: whether it is defined,
    and what its raw textual value is. Implementations can read from the
    process environment, an in-memory mapping, a file, or any other
    lookup. Neither method may raise for an unknown name.
    """

    def exists(self, name: str) -> bool:
        """Return True if the source defines a value for the flag.

        Args:
            name: Flag name (case-sensitive).

        Returns:
            True if the flag is defined, regardless of its value.
        """
        ...

    def raw_value(self, name: str) -> str | None:
        """Return the stored value of the flag.

        Args:
            name: Flag name (case-sensitive).

        Returns:
            The value as a string, or None if the flag is not defined.
        """
        ...


def normalize_value(value: Any) -> str:
    """Convert a stored flag value to its string form.

    Booleans map to "on"/"off"; strings are returned unchanged; anything
    else goes through str().
    """
    if isinstance(value, bool):
        return ON if value else OFF
    if isinstance(value, str):
        return value
    return str(value)
