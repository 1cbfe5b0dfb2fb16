"""Shared test fixtures for onflag."""

from pathlib import Path

import pytest

from onflag.registry import FlagRegistry
from onflag.sources.memory import MapSource


@pytest.fixture
def sample_flags() -> dict[str, str]:
    """Return the canonical two-flag mapping used across tests."""
    return {"daily_emails": "on", "automatic_happy_face_emoji": "off"}


@pytest.fixture
def flag_file(tmp_path: Path) -> Path:
    """Create a YAML flag file matching sample_flags."""
    path = tmp_path / "flags.yaml"
    path.write_text("daily_emails: on\nautomatic_happy_face_emoji: off\n")
    return path


@pytest.fixture
def registry(sample_flags: dict[str, str]) -> FlagRegistry:
    """Return a registry initialized with a MapSource of sample_flags."""
    return FlagRegistry(MapSource(sample_flags))
