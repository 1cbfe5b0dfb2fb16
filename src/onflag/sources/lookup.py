"""Adapter turning a plain lookup callable into a flag source."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from onflag.sources.interface import normalize_value


class LookupSource:
    """Flag source that delegates to a callable.

    The callable receives the flag name and returns its value, or None
    when the flag is undefined. Non-None values are normalized the same
    way MapSource normalizes them, so a lookup returning True is "on".

    Example:
        settings = {"daily_emails": True}
        source = LookupSource(settings.get)
    """

    def __init__(self, lookup: Callable[[str], Any]) -> None:
        self._lookup = lookup

    def exists(self, name: str) -> bool:
        return self._lookup(name) is not None

    def raw_value(self, name: str) -> str | None:
        value = self._lookup(name)
        if value is None:
            return None
        return normalize_value(value)

    def __repr__(self) -> str:
        return f"LookupSource({self._lookup!r})"
