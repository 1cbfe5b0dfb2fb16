"""Flag source backends.

Provides the FlagSource protocol and the built-in backends:
- EnvironmentSource: process environment variables
- MapSource: in-memory mapping
- FileSource: YAML flag file loaded at construction
- LookupSource: adapter for a custom lookup callable
"""

from onflag.sources.env import EnvironmentSource
from onflag.sources.file import FileSource, load_flag_file
from onflag.sources.interface import OFF, ON, FlagSource, normalize_value
from onflag.sources.lookup import LookupSource
from onflag.sources.memory import MapSource

__all__ = [
    "OFF",
    "ON",
    "EnvironmentSource",
    "FileSource",
    "FlagSource",
    "LookupSource",
    "MapSource",
    "load_flag_file",
    "normalize_value",
]
