"""In-memory flag source for tests and simple embedding."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from onflag.sources.interface import normalize_value


class MapSource:
    """Flag source backed by a name -> value mapping.

    Values may be "on"/"off" strings or booleans. The mapping is copied
    and normalized at construction, so later changes to the caller's
    mapping are not visible.
    """

    def __init__(self, flags: Mapping[str, Any] | None = None) -> None:
        self._flags: dict[str, str] = {
            name: normalize_value(value) for name, value in (flags or {}).items()
        }

    def exists(self, name: str) -> bool:
        return name in self._flags

    def raw_value(self, name: str) -> str | None:
        return self._flags.get(name)

    def names(self) -> list[str]:
        """Return the defined flag names in insertion order."""
        return list(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._flags)} flags)"
