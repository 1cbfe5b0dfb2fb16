"""Source selection from ONFLAG_* environment variables.

Environment variables:
- ONFLAG_SOURCE: Backend to use, "env" (default) or "file"
- ONFLAG_FILE: Path to the YAML flag file (required when ONFLAG_SOURCE=file)
- ONFLAG_ENV_PREFIX: Prefix for flag environment variables (default empty)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from onflag.exceptions import ConfigurationError
from onflag.registry import FlagRegistry
from onflag.sources.env import EnvironmentSource
from onflag.sources.file import FileSource
from onflag.sources.interface import FlagSource

logger = logging.getLogger(__name__)

SOURCE_ENV_VAR = "ONFLAG_SOURCE"
FILE_ENV_VAR = "ONFLAG_FILE"
PREFIX_ENV_VAR = "ONFLAG_ENV_PREFIX"

VALID_SOURCE_KINDS = frozenset({"env", "file"})


@dataclass(frozen=True)
class SourceSettings:
    """Which flag source to build and how."""

    kind: str = "env"
    file_path: Path | None = None
    env_prefix: str = ""

    def __post_init__(self) -> None:
        if self.kind not in VALID_SOURCE_KINDS:
            raise ConfigurationError(
                f"Invalid {SOURCE_ENV_VAR} '{self.kind}'. "
                f"Valid values are: {sorted(VALID_SOURCE_KINDS)}"
            )
        if self.kind == "file" and self.file_path is None:
            raise ConfigurationError(
                f"{FILE_ENV_VAR} must be set when {SOURCE_ENV_VAR}=file"
            )


def load_settings(environ: Mapping[str, str] | None = None) -> SourceSettings:
    """Read source settings from the environment.

    Args:
        environ: Mapping to read from instead of os.environ (for testing).

    Returns:
        SourceSettings built from ONFLAG_* variables.

    Raises:
        ConfigurationError: If the settings are invalid.
    """
    env = environ if environ is not None else os.environ

    kind = env.get(SOURCE_ENV_VAR, "").strip().lower() or "env"
    file_str = env.get(FILE_ENV_VAR, "").strip()
    file_path = Path(file_str).expanduser() if file_str else None

    return SourceSettings(
        kind=kind,
        file_path=file_path,
        env_prefix=env.get(PREFIX_ENV_VAR, ""),
    )


def build_source(
    settings: SourceSettings,
    environ: Mapping[str, str] | None = None,
) -> FlagSource:
    """Construct the flag source described by settings.

    Args:
        settings: Source settings.
        environ: Mapping for an EnvironmentSource to read (defaults to os.environ).

    Returns:
        The constructed source.

    Raises:
        SourceLoadError: If a file source cannot be loaded.
    """
    if settings.kind == "file":
        assert settings.file_path is not None
        return FileSource(settings.file_path)
    return EnvironmentSource(prefix=settings.env_prefix, environ=environ)


def source_from_environment(environ: Mapping[str, str] | None = None) -> FlagSource:
    """Build a flag source from ONFLAG_* environment variables."""
    settings = load_settings(environ)
    logger.debug("Using %s flag source", settings.kind)
    return build_source(settings, environ)


def registry_from_environment(
    environ: Mapping[str, str] | None = None,
) -> FlagRegistry:
    """Create an initialized FlagRegistry from ONFLAG_* environment variables."""
    return FlagRegistry(source_from_environment(environ))
