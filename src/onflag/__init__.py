"""onflag: feature flags resolved from a pluggable source."""

from onflag.config import (
    SourceSettings,
    build_source,
    load_settings,
    registry_from_environment,
    source_from_environment,
)
from onflag.exceptions import (
    ConfigurationError,
    FlagError,
    FlagMissingError,
    NotInitializedError,
    RegistryAlreadyInitializedError,
    SourceLoadError,
)
from onflag.registry import FlagCheck, FlagRegistry
from onflag.sources import (
    EnvironmentSource,
    FileSource,
    FlagSource,
    LookupSource,
    MapSource,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Registry
    "FlagCheck",
    "FlagRegistry",
    # Sources
    "EnvironmentSource",
    "FileSource",
    "FlagSource",
    "LookupSource",
    "MapSource",
    # Configuration
    "SourceSettings",
    "build_source",
    "load_settings",
    "registry_from_environment",
    "source_from_environment",
    # Exceptions
    "ConfigurationError",
    "FlagError",
    "FlagMissingError",
    "NotInitializedError",
    "RegistryAlreadyInitializedError",
    "SourceLoadError",
]
