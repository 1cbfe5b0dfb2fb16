"""YAML file flag source.

A flag file is a flat YAML mapping with one flag per line::

    daily_emails: on
    automatic_happy_face_emoji: off

Scalars are loaded as plain strings, with no YAML 1.1 boolean resolution,
so ``true`` or ``yes`` is rejected rather than read as ``on``, and names
such as ``no`` are ordinary flag names. Quoted ``"on"``/``"off"`` values
are accepted as well. The file is read and validated once, when the
source is constructed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import RootModel, ValidationError, field_validator

from onflag.exceptions import SourceLoadError
from onflag.sources.memory import MapSource

logger = logging.getLogger(__name__)


class FlagDocumentModel(RootModel[dict[str, Literal["on", "off"]]]):
    """Pydantic model for a flag file document."""

    @field_validator("root", mode="before")
    @classmethod
    def require_mapping(cls, v: Any) -> Any:
        """Reject documents that are not a mapping."""
        if not isinstance(v, dict):
            raise ValueError("flag file must be a YAML mapping")
        return v


def _format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error into a user-friendly message."""
    errors = error.errors()
    if errors:
        first_error = errors[0]
        loc = ".".join(str(x) for x in first_error.get("loc", []))
        msg = first_error.get("msg", str(error))
        if loc:
            return f"{loc}: {msg}"
        return msg
    return str(error)


def load_flag_file(path: Path) -> dict[str, str]:
    """Load and validate a YAML flag file.

    Args:
        path: Path to the flag file.

    Returns:
        Mapping of flag name to "on" or "off", in file order.

    Raises:
        SourceLoadError: If the file cannot be read, is not valid YAML,
            or contains anything other than name: on|off entries.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=yaml.BaseLoader)  # nosec B506
    except OSError as e:
        raise SourceLoadError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise SourceLoadError(path, f"Invalid YAML syntax: {e}") from e

    if data is None or data == "":
        return {}

    try:
        model = FlagDocumentModel.model_validate(data)
    except ValidationError as e:
        raise SourceLoadError(path, _format_validation_error(e)) from e

    return dict(model.root)


class FileSource(MapSource):
    """Flag source loaded from a YAML file at construction time.

    After loading it behaves exactly like MapSource.
    """

    def __init__(self, path: str | Path) -> None:
        """Load flags from a file.

        Args:
            path: Path to the YAML flag file. Tilde is expanded.

        Raises:
            SourceLoadError: If the file cannot be loaded.
        """
        self.path = Path(path).expanduser()
        flags = load_flag_file(self.path)
        super().__init__(flags)
        logger.debug("Loaded %d feature flags from %s", len(flags), self.path)

    def __repr__(self) -> str:
        return f"FileSource({str(self.path)!r})"
