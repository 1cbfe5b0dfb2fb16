"""Environment variable flag source.

A flag named ``daily_emails`` is read from the variable ``DAILY_EMAILS``,
or ``{prefix}DAILY_EMAILS`` when a prefix is configured.
"""

from __future__ import annotations

import os
from collections.abc import Mapping


class EnvironmentSource:
    """Flag source backed by environment variables.

    Values are returned exactly as set. The variable is read on every
    call, so the source reflects the environment at query time.
    """

    def __init__(
        self,
        prefix: str = "",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Create an environment source.

        Args:
            prefix: Prepended to the uppercased flag name (e.g., "APP_FEATURE_").
            environ: Mapping to read from instead of os.environ (for testing).
        """
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def variable_name(self, name: str) -> str:
        """Return the environment variable name for a flag."""
        return f"{self.prefix}{name.upper()}"

    def exists(self, name: str) -> bool:
        return self.variable_name(name) in self._environ

    def raw_value(self, name: str) -> str | None:
        return self._environ.get(self.variable_name(name))

    def __repr__(self) -> str:
        return f"EnvironmentSource(prefix={self.prefix!r})"
