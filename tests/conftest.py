"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seedtheme.config import Config  # noqa: E402
from seedtheme.theme_engine import create_theme  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration between tests."""
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture(scope="session")
def navy_theme():
    """Theme for seed #1a3048 with default parameters."""
    return create_theme(seed="#1a3048")


@pytest.fixture(scope="session")
def brand_theme():
    """Theme for seed #1f6feb with a blended brand red."""
    return create_theme(seed="#1f6feb", blend=True, custom_colors={"brand": "#ff0000"})


class FakePalette:
    """Tonal palette stand-in.

    Like ``TonalPalette.tone`` it returns ``[r, g, b, a]`` channels; the blue
    channel carries the requested tone so the packed ARGB equals the tone.
    """

    def __init__(self):
        self.calls = []

    def tone(self, value):
        self.calls.append(value)
        return [0, 0, value, 0]


@pytest.fixture
def fake_palette():
    return FakePalette()

